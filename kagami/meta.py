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
The meta module contains the base classes of every kagami model

Every Kubernetes object kagami knows about is a dataclass derived from
KagamiBase; top-level documents (those with apiVersion/kind) derive from
KagamiDocumentBase, and fields whose wire value can take one of several shapes
are typed with a KagamiUnion subclass. This module also holds the special
scalar types (Time, MicroTime, Quantity), the FieldMetadata used to attach
wire keys and schema information to fields, and the object-level operations
that work across all models: dup(), diff(), merge(), object_at_path() and
as_python_source().

The actual conversion to and from wire form lives in kagami.codec.
"""
import datetime
from enum import Enum
from typing import (Union, List, Dict, Any, Type, NewType, Optional, get_type_hints,
                    get_args, get_origin)
from dataclasses import fields, dataclass, field

NoneType = type(None)

# RFC 3339 timestamp, second precision on the wire
Time = NewType("Time", datetime.datetime)

# RFC 3339 timestamp with microseconds on the wire
MicroTime = NewType("MicroTime", datetime.datetime)

# resource quantity such as '500m' or '2Gi'; carried as an opaque string
Quantity = NewType("Quantity", str)


# computing type hints is costly and they never change for the life of a
# program, so they're kept per class once computed
_cached_hints: Dict[type, dict] = {}

_cached_args: Dict[type, dict] = {}


class FieldMetadata(dict):
    """
    Metadata for a model field, supplied through dataclasses.field(metadata=...)

    The 'wire' entry names the key a field is read from and written to when it
    differs from the attribute name; the 'unknown' entry marks the slot that
    holds unrecognised keys on extensible classes. The remaining entries only
    feed get_crd_schema() when generating a JSONSchemaProps for a class.
    """
    WIRE_KEY = "wire"
    UNKNOWN_KEY = "unknown"
    DESCRIPTION_KEY = "description"
    ENUM_KEY = "enum"
    FORMAT_KEY = "format"
    MIN_KEY = "minimum"
    EX_MIN_KEY = "exclusive_minimum"
    MAX_KEY = "maximum"
    EX_MAX_KEY = "exclusive_maximum"
    MULTIPLE_OF_KEY = "multiple_of"
    PATTERN_KEY = "pattern"
    MIN_ITEMS_KEY = "min_items"
    MAX_ITEMS_KEY = "max_items"
    UNIQUE_ITEMS_KEY = "unique_items"

    def __init__(self, wire: Optional[str] = None,
                 unknown: bool = False,
                 description: Optional[str] = None,
                 enum: Optional[list] = None,
                 format: Optional[str] = None,
                 minimum: Optional[Union[int, float]] = None,
                 exclusive_minimum: Optional[bool] = None,
                 maximum: Optional[Union[int, float]] = None,
                 exclusive_maximum: Optional[bool] = None,
                 multiple_of: Optional[Union[int, float]] = None,
                 pattern: Optional[str] = None,
                 min_items: Optional[int] = None,
                 max_items: Optional[int] = None,
                 unique_items: Optional[bool] = None):
        super(FieldMetadata, self).__init__()
        values = {self.WIRE_KEY: wire,
                  self.DESCRIPTION_KEY: description,
                  self.ENUM_KEY: enum,
                  self.FORMAT_KEY: format,
                  self.MIN_KEY: minimum,
                  self.EX_MIN_KEY: exclusive_minimum,
                  self.MAX_KEY: maximum,
                  self.EX_MAX_KEY: exclusive_maximum,
                  self.MULTIPLE_OF_KEY: multiple_of,
                  self.PATTERN_KEY: pattern,
                  self.MIN_ITEMS_KEY: min_items,
                  self.MAX_ITEMS_KEY: max_items,
                  self.UNIQUE_ITEMS_KEY: unique_items}
        self.update({k: v for k, v in values.items() if v is not None})
        if unknown:
            self[self.UNKNOWN_KEY] = True


def wire_field(wire: str, **kwargs):
    """
    Declares an optional field whose wire key differs from its attribute name

    :param wire: string; the literal key used in JSON/YAML, e.g. '$ref'
    :param kwargs: any other FieldMetadata arguments
    :return: a dataclasses.Field with a default of None
    """
    return field(default=None, metadata=FieldMetadata(wire=wire, **kwargs))


def unknown_fields_slot():
    """
    Declares the slot that keeps unrecognised keys on an extensible class

    Must be the last field of the class. Keys found on the wire that don't
    belong to any declared field are stored here in the order they were seen
    and are written back out after the declared fields.
    """
    return field(default_factory=dict, repr=False,
                 metadata=FieldMetadata(unknown=True))


def get_hints(cls) -> dict:
    """
    Returns the resolved type hints for all dataclass fields of cls, cached
    """
    cached_hints = _cached_hints.get(cls, None)
    if cached_hints is not None:
        return cached_hints
    hints = get_type_hints(cls)
    _cached_hints[cls] = hints
    return hints


def peel_optional(ftype) -> Any:
    """
    Returns the type inside an Optional[] annotation, or the annotation itself

    :raises NotImplementedError: for a Union that isn't just an Optional;
        models express alternatives with KagamiUnion subclasses instead
    """
    if get_origin(ftype) is Union:
        type_args = [a for a in get_args(ftype) if a is not NoneType]
        if len(type_args) != 1:
            raise NotImplementedError(f"Internal error! Only Optional[] unions "
                                      f"are supported, not {ftype}")  # pragma: no cover
        return type_args[0]
    return ftype


class DiffType (Enum):
    """
    These are the types of diffs that can be detected by :meth:`diff(
    )<kagami.KagamiBase.diff>` and reported in the
    :class:`DiffDetail<kagami.DiffDetail>` object

    The possible values are:

    ===================  ================================================================
    Value:               ...means:
    ===================  ================================================================
    ADDED                self has a value where the other object does not for this attribute
    REMOVED              self has None where the other object does not for this attribute
    VALUE_CHANGED        the other object's value differs from self's for this attribute
    TYPE_CHANGED         the populated alternative of a union field changed
    LIST_LENGTH_CHANGED  list len between self and other changed for this attributes
    INCOMPATIBLE_DIFF    the value of an attribute in self and other are incomparable types
    ===================  ================================================================
    """

    ADDED = 0
    REMOVED = 1
    VALUE_CHANGED = 2
    TYPE_CHANGED = 3
    LIST_LENGTH_CHANGED = 4
    INCOMPATIBLE_DIFF = 5


@dataclass
class DiffDetail:
    """
    The details of a difference found between two kagami objects using diff().

    Holds the kind of difference (a :class:`DiffType<kagami.DiffType>` value),
    the class where it was found, a formatted path, the path elements that
    :meth:`object_at_path()<kagami.KagamiBase.object_at_path>` accepts, and the
    two values compared. The read-only 'attrname' property returns path[-1].
    """
    diff_type: DiffType
    cls: Type
    formatted_path: str
    path: List[Union[str, int]]
    report: str
    value: Any = None
    other_value: Any = None

    @property
    def attrname(self):
        """
        returns the name of the attribute where the diff was found; same as path[-1]
        """
        return self.path[-1] if self.path else None


_not_there = object()

_scalar_types = (str, int, float, bool, datetime.datetime, NoneType)


def _dup_value(value):
    if isinstance(value, (KagamiBase, KagamiUnion)):
        return value.dup()
    if isinstance(value, dict):
        return {k: _dup_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_dup_value(v) for v in value]
    # scalars and datetimes are immutable
    return value


def _source_for(value) -> str:
    if isinstance(value, (KagamiBase, KagamiUnion)):
        return value.as_python_source()
    if isinstance(value, dict):
        pairs = [f"{k!r}: {_source_for(v)}" for k, v in value.items()]
        return "{" + ", ".join(pairs) + "}"
    if isinstance(value, list):
        return "[" + ", ".join(_source_for(v) for v in value) + "]"
    return repr(value)


@dataclass
class KagamiUnion(object):
    """
    Base for fields whose wire value may take one of several shapes

    Each dataclass field of a subclass is one alternative ("arm"), declared in
    the priority order used to pick an arm when decoding. At most one arm may
    be set; encoding emits the raw value of the populated arm with no wrapper.
    """
    def __post_init__(self):
        populated = [f.name for f in fields(self) if getattr(self, f.name) is not None]
        if len(populated) > 1:
            raise ValueError(f"Only one alternative of {self.__class__.__name__} "
                             f"may be set; got {', '.join(populated)}")

    @classmethod
    def alternatives(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @property
    def arm(self) -> Optional[str]:
        """
        returns the name of the populated alternative, or None if none is set
        """
        for f in fields(self):
            if getattr(self, f.name) is not None:
                return f.name
        return None

    @property
    def value(self) -> Any:
        """
        returns the value of the populated alternative, or None if none is set
        """
        arm = self.arm
        return getattr(self, arm) if arm is not None else None

    @classmethod
    def of(cls, value: Any, max_depth: Optional[int] = None):
        """
        Create an instance from a raw wire value, choosing the alternative by shape

        So IntOrString.of(3) populates intVal and IntOrString.of("30%")
        populates strVal.

        :param value: a raw value as it would appear in parsed JSON/YAML
        :param max_depth: optional int; overrides the default decode depth limit
        :raises UnionNoMatch: if no alternative accepts the shape of value
        """
        from kagami.codec import decode_value
        return decode_value(value, cls, max_depth=max_depth)

    def dup(self):
        """
        Create a deep copy of self
        """
        return self.__class__(**{f.name: _dup_value(getattr(self, f.name))
                                 for f in fields(self)})

    def as_python_source(self, assign_to: str = None) -> str:
        arm = self.arm
        args = f"{arm}={_source_for(self.value)}" if arm is not None else ""
        code = f"{self.__class__.__name__}({args})"
        return f"{assign_to} = {code}" if assign_to is not None else code


@dataclass
class KagamiBase(object):
    @classmethod
    def get_empty_instance(cls):
        """
        Returns an instance with every field unset

        Fields that carry a default (such as apiVersion and kind on documents)
        keep it; everything else is None.

        :return: an instance of 'cls'
        """
        cached_args = _cached_args.get(cls, None)
        if cached_args is None:
            cached_args = {}
            for f in fields(cls):
                if not f.init or f.metadata.get(FieldMetadata.UNKNOWN_KEY):
                    continue
                if f.name in ('apiVersion', 'kind') and isinstance(f.default, str):
                    continue
                cached_args[f.name] = None
            _cached_args[cls] = cached_args
        return cls(**cached_args)

    @classmethod
    def from_yaml(cls, yaml, max_depth: Optional[int] = None):
        """
        Create an instance of this class from parsed YAML or JSON.

        This factory method creates a new instance of the class upon which it is
        invoked and fills it from the supplied mapping, which may be a full
        document or a fragment of one, as long as the fragment is the kind of
        object this class models.

        :param yaml: a dict-like object as produced by a YAML or JSON parser
        :param max_depth: optional int; overrides the default decode depth limit
        :return: an instance of cls
        :raises DecodeError: (or a subclass) if the data doesn't fit the model
        """
        from kagami.codec import decode_object
        return decode_object(cls, yaml, max_depth=max_depth)

    def process(self, yaml, max_depth: Optional[int] = None) -> None:
        """
        Replace self's field values with those decoded from the supplied mapping.

        Fields absent in yaml become None on self.

        :param yaml: a dict-like object as produced by a YAML or JSON parser
        :param max_depth: optional int; overrides the default decode depth limit
        :raises DecodeError: (or a subclass) if the data doesn't fit the model
        """
        from kagami.codec import decode_object
        decoded = decode_object(self.__class__, yaml, max_depth=max_depth)
        for f in fields(self):
            setattr(self, f.name, getattr(decoded, f.name))

    def to_dict(self, sort_keys: bool = False) -> dict:
        """
        Provides a simple transfer to a dictionary representation of self

        :param sort_keys: optional bool, default False; if True, keys are sorted
            at every level of the result
        :return: A dict representation of self in wire form. Only set fields
            are in the resulting dict
        """
        from kagami.generate import get_clean_dict
        return get_clean_dict(self, sort_keys=sort_keys)

    def dup(self):
        """
        Create a deep copy of self

        :return: identical instance of self plus any contained instances
        """
        return self.__class__(**{f.name: _dup_value(getattr(self, f.name))
                                 for f in fields(self) if f.init})

    def object_at_path(self, path: list):
        """
        returns the value named by path starting at self

        Returns an object or base value by navigating the supplied path starting
        at 'self'. The elements of path are either strings representing attribute
        names or dict keys, or else integers in the case where an attribute name
        reaches a list (the int is used as an index into the list). Union values
        are stepped through transparently. The 'path' attribute of a
        DiffDetail can be used here directly.

        :param path: A list of strings or ints.
        :return: Whatever value is found at the end of the path

        :raises RuntimeError: raised if None is found anywhere along the path except
            at the last element
        :raises IndexError: raised if a path index value is beyond the end of a
            list-valued attribute
        :raises ValueError: if an index for a list can't be turned into an int
        :raises AttributeError: raised if any attribute on the path isn't an
            attribute of the previous object on the path
        """
        obj = self
        for p in path:
            if isinstance(obj, KagamiUnion):
                obj = obj.value
            if obj is None:
                raise RuntimeError(f"Path {path} leads to None before {p}")
            if isinstance(obj, (list, tuple)):
                try:
                    idx_p = int(p)
                except ValueError:
                    raise ValueError(f"Path element isn't an int for list"
                                     f" attribute; attr={p}")
                try:
                    obj = obj[idx_p]
                except IndexError:
                    raise IndexError(f"Index {idx_p} is beyond the end of the list")
            elif isinstance(obj, dict):
                obj = obj.get(p)
            else:
                try:
                    obj = getattr(obj, p, _not_there)
                except TypeError:
                    raise TypeError(f'{p} is an illegal attribute')
                if obj is _not_there:
                    raise AttributeError(f"Path {path} leads to an unknown attr at {p}")
        return obj

    @classmethod
    def _diff(cls, attr: Any, other_attr: Any, containing_cls: Type,
              attr_path: List[Union[str, int]],
              formatted_attr_path: str) -> List[DiffDetail]:
        # recursively compares attr to other_attr; this is a classmethod since
        # it's also applied to plain values like ints and dicts
        if attr is not None and other_attr is None:
            return [DiffDetail(DiffType.ADDED, containing_cls, formatted_attr_path,
                               attr_path,
                               f"Added: {formatted_attr_path} is {attr} in self but "
                               f"does not exist in other",
                               attr, None)]
        if attr is None and other_attr is not None:
            return [DiffDetail(DiffType.REMOVED, containing_cls, formatted_attr_path,
                               attr_path,
                               f"Removed: {formatted_attr_path} does not exist in self "
                               f"but in other it is {other_attr}",
                               None, other_attr)]
        if type(attr) != type(other_attr):
            return [DiffDetail(DiffType.INCOMPATIBLE_DIFF, containing_cls,
                               formatted_attr_path, attr_path,
                               f"Type mismatch: {formatted_attr_path} is a {type(attr)} "
                               f"in self but in other it is a {type(other_attr)}",
                               attr, other_attr)]
        if isinstance(attr, _scalar_types):
            if attr == other_attr:
                return []
            return [DiffDetail(DiffType.VALUE_CHANGED, containing_cls,
                               formatted_attr_path, attr_path,
                               f"Value mismatch: {formatted_attr_path} is {attr} in self "
                               f"but in other it is {other_attr}",
                               attr, other_attr)]
        if isinstance(attr, KagamiUnion):
            if attr.arm != other_attr.arm:
                return [DiffDetail(DiffType.TYPE_CHANGED, containing_cls,
                                   formatted_attr_path, attr_path,
                                   f"Alternative changed: {formatted_attr_path} holds "
                                   f"{attr.arm} in self but {other_attr.arm} in other",
                                   attr, other_attr)]
            return cls._diff(attr.value, other_attr.value, containing_cls,
                             attr_path, formatted_attr_path)
        if isinstance(attr, KagamiBase):
            diffs = []
            for f in fields(attr):
                diffs.extend(cls._diff(getattr(attr, f.name),
                                       getattr(other_attr, f.name),
                                       attr.__class__,
                                       attr_path + [f.name],
                                       f"{formatted_attr_path}.{f.name}"))
            return diffs
        if isinstance(attr, dict):
            diffs = []
            all_keys = list(attr.keys()) + [k for k in other_attr if k not in attr]
            for key in all_keys:
                diffs.extend(cls._diff(attr.get(key), other_attr.get(key),
                                       containing_cls, attr_path + [key],
                                       f"{formatted_attr_path}['{key}']"))
            return diffs
        if isinstance(attr, list):
            if len(attr) != len(other_attr):
                return [DiffDetail(DiffType.LIST_LENGTH_CHANGED, containing_cls,
                                   formatted_attr_path, attr_path,
                                   f"Length mismatch: list {formatted_attr_path} has "
                                   f"{len(attr)} elements, but other has "
                                   f"{len(other_attr)}",
                                   attr, other_attr)]
            diffs = []
            for i, self_element in enumerate(attr):
                diffs.extend(cls._diff(self_element, other_attr[i], containing_cls,
                                       attr_path + [i],
                                       f"{formatted_attr_path}[{i}]"))
            return diffs
        raise NotImplementedError(f"Internal error! Don't know how to compare"
                                  f" attribute {attr} with {other_attr}."
                                  f" Please file a bug report.")  # pragma: no cover

    def diff(self, other) -> List[DiffDetail]:
        """
        Compares self to other and returns list of differences and where they are

        The ``diff()`` method goes field-by-field between two objects looking for
        differences, recursing into contained objects, unions, dicts and lists.
        An unset field and a field set to a zero value are different.

        :param other: some kind of KagamiBase subclass. If not the same class as
            self, then a single DiffDetail object is returned describing this
            and the diff stops.
        :return: a list of DiffDetail objects that describe all the discovered
            differences. If the list is empty then the two are equal.
        """
        if self.__class__ != other.__class__:
            return [DiffDetail(DiffType.INCOMPATIBLE_DIFF, self.__class__, "", [],
                               f'Incompatible: self is a {self.__class__.__name__} while '
                               f'other is a {other.__class__.__name__}')]
        return self._diff(self, other, self.__class__, [], self.__class__.__name__)

    def merge(self, other, overwrite: bool = False):
        """
        Merges the values of another object of the same type into self

        The default is to pull over any set fields from other into self. If
        additional subobjects are in other then new copies of them are put into
        self (if none exists already), otherwise values are merged into the
        subobject. Dicts are merged key by key and lists element by element.

        If ``overwrite`` is True, then every field from other is pulled into
        self, so a field in self that previously had a value may become unset.

        :param other: source of values to merge into self; must have the same
            class name as self.
        :param overwrite: optional bool, default False. The default only merges in
            attributes from other that are set.
        :raises TypeError: if other isn't the same 'type' as self, or if any of
            their components aren't merge-able.
        :return: self with values for other merged in
        """
        if self.__class__.__name__ != other.__class__.__name__:
            raise TypeError(f'Type name mismatch: trying to merge a '
                            f'{other.__class__.__name__} into a '
                            f'{self.__class__.__name__}')

        for f in fields(self):
            k = f.name
            self_val = getattr(self, k)
            other_val = getattr(other, k)
            if other_val is None:
                if overwrite:
                    setattr(self, k, None)
                continue
            if isinstance(other_val, (str, int, float, bool, datetime.datetime)):
                if overwrite or self_val is None:
                    setattr(self, k, other_val)
                continue
            if isinstance(other_val, KagamiUnion):
                if overwrite or self_val is None:
                    setattr(self, k, other_val.dup())
                continue
            if isinstance(other_val, dict):
                if overwrite or self_val is None:
                    setattr(self, k, _dup_value(other_val))
                elif not isinstance(self_val, dict):
                    raise TypeError(f"Failed merging {k}: tried to merge a dict "
                                    f"into a {self_val.__class__.__name__}")
                else:
                    for key, val in other_val.items():
                        if key not in self_val or self_val[key] is None:
                            self_val[key] = _dup_value(val)
                        elif (isinstance(val, KagamiBase) and
                                isinstance(self_val[key], KagamiBase)):
                            self_val[key].merge(val)
                continue
            if isinstance(other_val, KagamiBase):
                if overwrite or self_val is None:
                    setattr(self, k, other_val.dup())
                elif not isinstance(self_val, KagamiBase):
                    raise TypeError(f"Failed merging {k}: tried to merge a "
                                    f"{other_val.__class__.__name__} into a non-"
                                    f"KagamiBase instance")
                else:
                    self_val.merge(other_val, overwrite=overwrite)
                continue
            if isinstance(other_val, list):
                if overwrite or self_val is None:
                    setattr(self, k, _dup_value(other_val))
                    continue
                if not isinstance(self_val, list):
                    raise TypeError(f"Failed merging {k}: tried to merge a "
                                    f"list into a {self_val.__class__.__name__}")
                for i, other_item in enumerate(other_val):
                    if i >= len(self_val):
                        self_val.append(_dup_value(other_item))
                    elif self_val[i] is None:
                        self_val[i] = _dup_value(other_item)
                    elif isinstance(other_item, KagamiBase):
                        if not isinstance(self_val[i], KagamiBase):
                            raise TypeError(f"Failed merging item {i} of {k}: "
                                            f"can't merge a KagamiBase subclass "
                                            f"into a {self_val[i].__class__.__name__}")
                        self_val[i].merge(other_item)
                continue
            raise NotImplementedError(f"Don't know how to merge {k}'s "
                                      f"{other_val.__class__.__name__}")  # pragma: no cover
        return self

    def as_python_source(self, assign_to: str = None) -> str:
        """
        generate a string of Python code that will re-create the object and all
        contained objects

        :param assign_to: string. If supplied, must be a legal Python variable
            name. The generated code will be assigned to this variable in the
            returned string.
        :return: single string of python code that if run will re-create self.

        NOTE: the returned code string will not include any necessary imports
            (the model classes, and 'datetime' for time values); the caller is
            expected to supply that boilerplate.
        """
        parameters = []
        for f in fields(self):
            if not f.init:
                continue  # pragma: no cover
            val = getattr(self, f.name)
            if val is None:
                continue
            if f.metadata.get(FieldMetadata.UNKNOWN_KEY) and not val:
                continue
            parameters.append(f"{f.name}={_source_for(val)}")
        code = f"{self.__class__.__name__}({', '.join(parameters)})"
        return f"{assign_to} = {code}" if assign_to is not None else code


@dataclass
class KagamiDocumentBase(KagamiBase):
    """
    Base for top-level Kubernetes objects, the ones that carry apiVersion and kind

    Subclasses declare apiVersion and kind as fields with their canonical values
    as defaults; those values are how load_full_yaml() and the client locate
    the class for a document (see kagami.version_kind).
    """
    pass
