#
# Copyright (c) 2021 Incisive Technology Ltd
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
"""
Conversion between kagami model objects and their wire (JSON/YAML) form

Each model class gets a field table built once and cached: a mapping from wire
key to the attribute and type that key populates. Decoding walks the input
using only that table; encoding walks the table of the object's class. Union
fields are dispatched on the kind of the raw value, opaque (Any) fields are
copied verbatim, and every nested object counts against a maximum decode depth.
"""
import datetime
import json
import logging
from dataclasses import fields, is_dataclass
from typing import Any, Dict, NamedTuple, Optional, Union, get_args, get_origin

from dateutil.parser import isoparse
from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from kagami.errors import (TypeMismatch, UnionNoMatch, DepthExceeded,
                           UnknownFormat, EncodeError)
from kagami.meta import (KagamiBase, KagamiUnion, FieldMetadata, Time, MicroTime,
                         Quantity, get_hints, peel_optional)
from kagami.settings import get_default_max_depth, _check_depth

logger = logging.getLogger(__name__)

_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
_MICRO_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


class _TextTimestampConstructor(SafeConstructor):
    """
    Safe constructor that leaves YAML timestamps as the text they were written as
    """


_TextTimestampConstructor.add_constructor("tag:yaml.org,2002:timestamp",
                                          SafeConstructor.construct_yaml_str)


def yaml_parser() -> YAML:
    """
    Returns a safe YAML parser that reads timestamps as plain strings

    Time and MicroTime fields parse their text themselves; everywhere else a
    timestamp-looking scalar is kept exactly as written.
    """
    parser = YAML(typ="safe")
    parser.Constructor = _TextTimestampConstructor
    return parser


class FieldSpec(NamedTuple):
    wire_key: str
    attr: str
    ftype: Any


class FieldTable(NamedTuple):
    fields: Dict[str, FieldSpec]
    unknown_attr: Optional[str]


_field_tables: Dict[type, FieldTable] = {}


def field_table(cls) -> FieldTable:
    """
    Returns the wire key -> FieldSpec table for a model class

    Fields are in declaration order. The wire key is the attribute name unless
    the field's metadata names another. The FieldSpec type has any Optional[]
    wrapper removed. unknown_attr names the slot that keeps unrecognised keys,
    or is None if the class drops them.

    :param cls: a KagamiBase subclass
    :return: FieldTable for cls
    """
    table = _field_tables.get(cls)
    if table is None:
        hints = get_hints(cls)
        specs: Dict[str, FieldSpec] = {}
        unknown_attr = None
        for f in fields(cls):
            if f.metadata.get(FieldMetadata.UNKNOWN_KEY):
                unknown_attr = f.name
                continue
            if not f.init:
                continue
            wire_key = f.metadata.get(FieldMetadata.WIRE_KEY, f.name)
            specs[wire_key] = FieldSpec(wire_key, f.name, peel_optional(hints[f.name]))
        table = FieldTable(specs, unknown_attr)
        _field_tables[cls] = table
    return table


def _join(path: str, key) -> str:
    return f"{path}.{key}" if path else str(key)


def kind_of(raw) -> str:
    """
    Names the wire kind of a parsed value: null, boolean, integer, number,
    string, object, array or timestamp
    """
    if raw is None:
        return "null"
    if isinstance(raw, bool):
        return "boolean"
    if isinstance(raw, int):
        return "integer"
    if isinstance(raw, float):
        return "number"
    if isinstance(raw, str):
        return "string"
    if isinstance(raw, dict):
        return "object"
    if isinstance(raw, (list, tuple)):
        return "array"
    if isinstance(raw, (datetime.datetime, datetime.date)):
        return "timestamp"
    return type(raw).__name__


def _is_model(ftype, base) -> bool:
    return isinstance(ftype, type) and issubclass(ftype, base)


def container_origin(ftype):
    if ftype in (list, dict):
        return ftype
    origin = get_origin(ftype)
    if origin in (list, dict):
        return origin
    return None


def _timestamp_text(value) -> str:
    # datetimes in caller-built dicts that land where text is expected
    if isinstance(value, datetime.datetime) and value.tzinfo is None:
        return f"{value.isoformat()}Z"
    return value.isoformat()


def parse_time(text: str, micro: bool = False) -> datetime.datetime:
    """
    Parses RFC 3339 text into an aware UTC datetime; text without an offset is UTC

    :param text: the timestamp, e.g. '2025-01-02T03:04:05.123456Z'
    :param micro: bool; if False, any fraction of a second is truncated
    :return: datetime in UTC
    :raises ValueError: if text isn't an ISO 8601 timestamp
    """
    value = isoparse(text)
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    value = value.astimezone(datetime.timezone.utc)
    return value if micro else value.replace(microsecond=0)


def format_time(value: datetime.datetime, micro: bool = False) -> str:
    """
    Formats a datetime as RFC 3339 text in UTC; naive values are taken as UTC

    :param value: the datetime
    :param micro: bool; if True six fractional digits are written
    """
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
    return value.strftime(_MICRO_TIME_FORMAT if micro else _TIME_FORMAT)


class _Decoder(object):
    def __init__(self, max_depth: int):
        self.max_depth = max_depth

    def check_depth(self, path: str, depth: int):
        if depth >= self.max_depth:
            raise DepthExceeded(path, self.max_depth)

    def object(self, cls, data, path: str, depth: int):
        self.check_depth(path, depth)
        if not isinstance(data, dict):
            raise TypeMismatch(path, "object", kind_of(data))
        table = field_table(cls)
        kwargs = {spec.attr: None for spec in table.fields.values()}
        unknown = {}
        for key, raw in data.items():
            spec = table.fields.get(key)
            if spec is not None:
                kwargs[spec.attr] = self.value(raw, spec.ftype, _join(path, key), depth)
            elif table.unknown_attr is not None:
                unknown[key] = self.opaque(raw, _join(path, key), depth + 1)
            else:
                logger.debug("Dropping unknown key '%s' for %s at %s", key,
                             cls.__name__, path or "<root>")
        inst = cls(**kwargs)
        if table.unknown_attr is not None:
            setattr(inst, table.unknown_attr, unknown)
        return inst

    def opaque(self, raw, path: str, depth: int):
        if isinstance(raw, dict):
            self.check_depth(path, depth)
            return {k: self.opaque(v, _join(path, k), depth + 1)
                    for k, v in raw.items()}
        if isinstance(raw, (list, tuple)):
            self.check_depth(path, depth)
            return [self.opaque(v, f"{path}[{i}]", depth + 1)
                    for i, v in enumerate(raw)]
        if isinstance(raw, (datetime.datetime, datetime.date)):
            return _timestamp_text(raw)
        return raw

    def union(self, ucls, raw, path: str, depth: int):
        hints = get_hints(ucls)
        for f in fields(ucls):
            arm_type = peel_optional(hints[f.name])
            if accepts(arm_type, raw):
                return ucls(**{f.name: self.value(raw, arm_type, path, depth)})
        raise UnionNoMatch(path, ucls.__name__, kind_of(raw), ucls.alternatives())

    def time(self, raw, path: str, micro: bool):
        expected = "MicroTime" if micro else "Time"
        if isinstance(raw, datetime.datetime):
            if raw.tzinfo is None:
                raw = raw.replace(tzinfo=datetime.timezone.utc)
            raw = raw.astimezone(datetime.timezone.utc)
            return raw if micro else raw.replace(microsecond=0)
        if not isinstance(raw, str):
            raise TypeMismatch(path, expected, kind_of(raw))
        try:
            return parse_time(raw, micro=micro)
        except (ValueError, OverflowError):
            raise TypeMismatch(path, expected, f"string '{raw}'")

    def value(self, raw, ftype, path: str, depth: int):
        # depth is that of the object holding the value
        if raw is None:
            return None
        if ftype is Any:
            return self.opaque(raw, path, depth + 1)
        if _is_model(ftype, KagamiUnion):
            return self.union(ftype, raw, path, depth)
        if _is_model(ftype, KagamiBase) or is_dataclass(ftype):
            return self.object(ftype, raw, path, depth + 1)
        origin = container_origin(ftype)
        if origin is list:
            if not isinstance(raw, (list, tuple)):
                raise TypeMismatch(path, "array", kind_of(raw))
            args = get_args(ftype)
            item_type = args[0] if args else Any
            return [self.value(item, item_type, f"{path}[{i}]", depth)
                    for i, item in enumerate(raw)]
        if origin is dict:
            if not isinstance(raw, dict):
                raise TypeMismatch(path, "object", kind_of(raw))
            args = get_args(ftype)
            value_type = args[1] if args else Any
            return {k: self.value(v, value_type, _join(path, k), depth)
                    for k, v in raw.items()}
        if ftype is Time or ftype is MicroTime:
            return self.time(raw, path, ftype is MicroTime)
        if ftype is Quantity:
            # YAML reads 'cpu: 2' as a number
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                return str(raw)
            if not isinstance(raw, str):
                raise TypeMismatch(path, "Quantity", kind_of(raw))
            return raw
        if ftype is str:
            if isinstance(raw, (datetime.datetime, datetime.date)):
                return _timestamp_text(raw)
            if not isinstance(raw, str):
                raise TypeMismatch(path, "string", kind_of(raw))
            return raw
        if ftype is bool:
            if not isinstance(raw, bool):
                raise TypeMismatch(path, "boolean", kind_of(raw))
            return raw
        if ftype is int:
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise TypeMismatch(path, "integer", kind_of(raw))
            return raw
        if ftype is float:
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise TypeMismatch(path, "number", kind_of(raw))
            return raw
        raise NotImplementedError(f"Don't know how to decode a value for a field "
                                  f"of type {ftype} at {path}")  # pragma: no cover


def accepts(ftype, raw) -> bool:
    """
    Returns True if a raw wire value has a shape that ftype can hold

    Only the kind of the value is considered (boolean, integer, number, string,
    object, array); the value's contents are checked when it is decoded.
    """
    if ftype is Any:
        return True
    if _is_model(ftype, KagamiUnion):
        hints = get_hints(ftype)
        return any(accepts(peel_optional(hints[f.name]), raw) for f in fields(ftype))
    if _is_model(ftype, KagamiBase):
        return isinstance(raw, dict)
    origin = container_origin(ftype)
    if origin is list:
        return isinstance(raw, (list, tuple))
    if origin is dict:
        return isinstance(raw, dict)
    if ftype is bool:
        return isinstance(raw, bool)
    if ftype is int:
        return isinstance(raw, int) and not isinstance(raw, bool)
    if ftype is float:
        return isinstance(raw, (int, float)) and not isinstance(raw, bool)
    if ftype in (str, Quantity, Time, MicroTime):
        return isinstance(raw, str)
    return False


def _resolve_max_depth(max_depth: Optional[int]) -> int:
    if max_depth is None:
        return get_default_max_depth()
    _check_depth(max_depth)
    return max_depth


def decode_object(cls, data: dict, max_depth: Optional[int] = None):
    """
    Decodes a parsed mapping into an instance of a model class

    :param cls: a KagamiBase subclass
    :param data: dict as produced by a JSON or YAML parser
    :param max_depth: optional int; maximum nesting depth of objects below the
        root. If not supplied, kagami.settings.get_default_max_depth() is used.
    :return: an instance of cls
    :raises TypeError: if cls isn't a KagamiBase subclass
    :raises DecodeError: (or a subclass) if data doesn't fit cls
    """
    if not _is_model(cls, KagamiBase):
        raise TypeError("cls must be a subclass of KagamiBase")
    decoder = _Decoder(_resolve_max_depth(max_depth))
    try:
        return decoder.object(cls, data, "", 0)
    except RecursionError:
        raise DepthExceeded("", decoder.max_depth)


def decode_value(raw, ftype, max_depth: Optional[int] = None):
    """
    Decodes a single parsed value according to a field type

    :param raw: parsed JSON/YAML value
    :param ftype: the type the value is to have, such as IntOrString or
        List[Container]
    :param max_depth: optional int; maximum nesting depth
    :return: the decoded value
    :raises DecodeError: (or a subclass) if raw doesn't fit ftype
    """
    decoder = _Decoder(_resolve_max_depth(max_depth))
    try:
        return decoder.value(raw, ftype, "", -1)
    except RecursionError:
        raise DepthExceeded("", decoder.max_depth)


def parse_text(text: Union[str, bytes], max_depth: Optional[int] = None) -> Any:
    """
    Parses JSON or YAML text; JSON is tried first

    YAML timestamps are returned as the strings they were written as.

    :param text: str or bytes (UTF-8)
    :param max_depth: optional int; only used to report a DepthExceeded when
        the parser itself runs out of stack on deeply nested text
    :return: the parsed value
    :raises UnknownFormat: if the text is neither JSON nor YAML
    :raises DepthExceeded: if the text nests too deeply to parse
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnknownFormat(f"input isn't UTF-8 text: {e}")
    try:
        try:
            return json.loads(text)
        except ValueError:
            logger.debug("Input isn't JSON; parsing it as YAML")
        try:
            return yaml_parser().load(text)
        except YAMLError as e:
            raise UnknownFormat(f"input is neither JSON nor YAML: {e}")
    except RecursionError:
        raise DepthExceeded("", _resolve_max_depth(max_depth))


def decode(data: Union[str, bytes, dict], cls, max_depth: Optional[int] = None):
    """
    Decodes JSON or YAML text, or an already parsed mapping, into an instance of cls

    :param data: str or bytes holding one JSON or YAML document, or a dict
    :param cls: a KagamiBase subclass; the kind of object data describes
    :param max_depth: optional int; maximum nesting depth of objects below the
        root. Defaults to kagami.settings.get_default_max_depth().
    :return: an instance of cls
    :raises UnknownFormat: if data isn't JSON or YAML describing a mapping
    :raises DepthExceeded: if the input nests deeper than max_depth
    :raises DecodeError: (or another subclass) if the data doesn't fit cls
    """
    if isinstance(data, (str, bytes, bytearray)):
        data = parse_text(data, max_depth=max_depth)
    if not isinstance(data, dict):
        raise UnknownFormat(f"input describes a {kind_of(data)}, not a mapping")
    return decode_object(cls, data, max_depth=max_depth)


def _type_name(ftype) -> str:
    return getattr(ftype, "__name__", str(ftype))


def _encode_opaque(value, path: str):
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, dict):
        return {k: _encode_opaque(v, _join(path, k)) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode_opaque(v, f"{path}[{i}]") for i, v in enumerate(value)]
    if isinstance(value, datetime.datetime):
        return format_time(value, micro=bool(value.microsecond))
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, KagamiBase):
        return _encode_object(value, path)
    if isinstance(value, KagamiUnion):
        return _encode_union(value, type(value), path)
    raise EncodeError(f"{type(value).__name__} can't be written as JSON", path)


def _encode_union(value, ucls, path: str):
    if not isinstance(value, ucls):
        raise EncodeError(f"expected {ucls.__name__}, got {type(value).__name__}", path)
    populated = [f.name for f in fields(value) if getattr(value, f.name) is not None]
    if not populated:
        raise EncodeError(f"no alternative of {ucls.__name__} is set", path)
    if len(populated) > 1:
        raise EncodeError(f"only one alternative of {ucls.__name__} may be set; "
                          f"got {', '.join(populated)}", path)
    arm = populated[0]
    arm_type = peel_optional(get_hints(ucls)[arm])
    return encode_value(getattr(value, arm), arm_type, path)


def _mismatch(path: str, expected: str, value) -> EncodeError:
    return EncodeError(f"expected {expected}, got {type(value).__name__}", path)


def encode_value(value, ftype, path: str = ""):
    """
    Encodes a single value of the given field type into its wire form

    :raises EncodeError: if value isn't of the kind ftype requires
    """
    if value is None:
        return None
    if ftype is Any:
        return _encode_opaque(value, path)
    if _is_model(ftype, KagamiUnion):
        return _encode_union(value, ftype, path)
    if _is_model(ftype, KagamiBase) or is_dataclass(ftype):
        if not isinstance(value, ftype):
            raise _mismatch(path, ftype.__name__, value)
        return _encode_object(value, path)
    origin = container_origin(ftype)
    if origin is list:
        if not isinstance(value, (list, tuple)):
            raise _mismatch(path, "list", value)
        args = get_args(ftype)
        item_type = args[0] if args else Any
        return [encode_value(v, item_type, f"{path}[{i}]") for i, v in enumerate(value)]
    if origin is dict:
        if not isinstance(value, dict):
            raise _mismatch(path, "dict", value)
        args = get_args(ftype)
        value_type = args[1] if args else Any
        return {k: encode_value(v, value_type, _join(path, k)) for k, v in value.items()}
    if ftype is Time or ftype is MicroTime:
        if not isinstance(value, datetime.datetime):
            raise _mismatch(path, "datetime", value)
        return format_time(value, micro=ftype is MicroTime)
    if ftype is Quantity or ftype is str:
        if not isinstance(value, str):
            raise _mismatch(path, "str", value)
        return value
    if ftype is bool:
        if not isinstance(value, bool):
            raise _mismatch(path, "bool", value)
        return value
    if ftype is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _mismatch(path, "int", value)
        return value
    if ftype is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(path, "float", value)
        return value
    raise EncodeError(f"fields of type {_type_name(ftype)} can't be "
                      f"encoded", path)  # pragma: no cover


def _encode_object(obj, path: str) -> dict:
    table = field_table(obj.__class__)
    result = {}
    for spec in table.fields.values():
        value = getattr(obj, spec.attr)
        if value is None:
            continue
        result[spec.wire_key] = encode_value(value, spec.ftype,
                                             _join(path, spec.wire_key))
    if table.unknown_attr is not None:
        for key, value in (getattr(obj, table.unknown_attr) or {}).items():
            if key not in result:
                result[key] = _encode_opaque(value, _join(path, key))
    return result


def _sorted(value):
    if isinstance(value, dict):
        return {k: _sorted(value[k]) for k in sorted(value)}
    if isinstance(value, list):
        return [_sorted(v) for v in value]
    return value


def encode(obj, sort_keys: bool = False) -> dict:
    """
    Encodes a model object into a dict of wire values

    Only set fields appear, under their wire keys and in declaration order,
    followed by any preserved unknown keys. Empty containers and zero values
    are set values and so are included.

    :param obj: a KagamiBase instance
    :param sort_keys: optional bool, default False; if True keys are sorted at
        every level
    :return: dict ready for json.dumps() or a YAML dumper
    :raises TypeError: if obj isn't a KagamiBase instance
    :raises EncodeError: if a field holds a value that doesn't fit its type
    """
    if not isinstance(obj, KagamiBase):
        raise TypeError("obj must be an instance of a KagamiBase subclass")
    result = _encode_object(obj, "")
    return _sorted(result) if sort_keys else result

