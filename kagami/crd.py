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
from dataclasses import fields, is_dataclass, MISSING
from typing import Any, Optional, get_args
from kagami.meta import (KagamiBase, KagamiDocumentBase, KagamiUnion, FieldMetadata as fm,
                         Time, MicroTime, Quantity, get_hints, peel_optional)
from kagami.codec import decode_object, field_table, container_origin

_ignorable = {'apiVersion', 'kind', 'metadata'}
_type_map = {str: "string", int: "integer", float: "number", bool: "boolean"}


def get_crd_schema(cls, jsp_class: Optional[type] = None):
    """
    Return a JSONSchemaProps instance suitable for describing this class in a CustomResourceDefinition msg

    This function takes a KagamiBase/KagamiDocumentBase subclass (not instance!) and returns a
    JSONSchemaProps object that describes a schema that reflects the class. The returned
    JSONSchemaProps object can then be used in the schema of a CustomResourceDefinitionVersion.

    Field metadata (see FieldMetadata) can supply a description, enum values, a format, numeric
    bounds, a pattern and list size limits for each field. Fields without a default are listed
    as required. For a KagamiDocumentBase subclass, apiVersion, kind and metadata are left
    to the API server and don't appear.

    Limitations:

    - Cannot handle recursively defined classes, neither direct nor indirect.
    - The only union supported is IntOrString.

    :param cls: a class object, derived from at least KagamiBase. A schema for this class will be
        generated and returned as the value of the function.
    :param jsp_class: optional type; a JSONSchemaProps class object (not instance). By default, the
        class from kagami.model.apiextensions_v1 is used.
    :raises TypeError: if cls (or any class it contains) isn't a dataclass, is recursive, or
        uses a field type that has no schema equivalent
    """
    if jsp_class is not None:
        if jsp_class.__name__ != "JSONSchemaProps":
            raise TypeError("The jsp_class parameter must be a JSONSchemaProps class")
    else:
        from kagami.model.apiextensions_v1 import JSONSchemaProps
        jsp_class = JSONSchemaProps

    schema = _process_cls(cls, [])
    return decode_object(jsp_class, schema)


def _set_if_non_null(metadata: dict, mkey: str, prop: dict, pkey: str):
    val = metadata.get(mkey)
    if val is not None:
        prop[pkey] = val


def _check_simple_type_modifiers(ptype: type, metadata: dict, prop: dict):
    _set_if_non_null(metadata, fm.FORMAT_KEY, prop, 'format')
    if ptype in (int, float):
        _set_if_non_null(metadata, fm.MIN_KEY, prop, 'minimum')
        _set_if_non_null(metadata, fm.EX_MIN_KEY, prop, 'exclusiveMinimum')
        _set_if_non_null(metadata, fm.MAX_KEY, prop, 'maximum')
        _set_if_non_null(metadata, fm.EX_MAX_KEY, prop, 'exclusiveMaximum')
        _set_if_non_null(metadata, fm.MULTIPLE_OF_KEY, prop, 'multipleOf')
    elif ptype is str:
        _set_if_non_null(metadata, fm.PATTERN_KEY, prop, 'pattern')


def _check_array_modifiers(metadata: dict, prop: dict):
    _set_if_non_null(metadata, fm.MIN_ITEMS_KEY, prop, 'minItems')
    _set_if_non_null(metadata, fm.MAX_ITEMS_KEY, prop, 'maxItems')
    _set_if_non_null(metadata, fm.UNIQUE_ITEMS_KEY, prop, 'uniqueItems')


def _type_schema(ftype, metadata: dict, name: str, in_progress: list) -> dict:
    # metadata modifiers apply to scalars directly or to a list's items
    if ftype in _type_map:
        prop = {"type": _type_map[ftype]}
        if ftype is not bool:
            _set_if_non_null(metadata, fm.ENUM_KEY, prop, 'enum')
        _check_simple_type_modifiers(ftype, metadata, prop)
        return prop
    if ftype is Time or ftype is MicroTime:
        return {"type": "string", "format": "date-time"}
    if ftype is Quantity:
        return {"x-kubernetes-int-or-string": True}
    if ftype is Any:
        return {"x-kubernetes-preserve-unknown-fields": True}
    if isinstance(ftype, type) and issubclass(ftype, KagamiUnion):
        if ftype.__name__ == "IntOrString":
            return {"x-kubernetes-int-or-string": True}
        raise TypeError(f"Don't know how to process {name}'s union type {ftype.__name__}")
    if isinstance(ftype, type) and issubclass(ftype, KagamiBase):
        return _process_cls(ftype, in_progress)
    origin = container_origin(ftype)
    args = get_args(ftype)
    if origin is list:
        prop = {"type": "array"}
        _check_array_modifiers(metadata, prop)
        prop["items"] = _type_schema(args[0] if args else Any, metadata, name, in_progress)
        return prop
    if origin is dict:
        return {"type": "object",
                "additionalProperties": _type_schema(args[1] if args else Any, {},
                                                     name, in_progress)}
    raise TypeError(f"Don't know how to process {name}'s type {ftype}")


def _process_cls(cls, in_progress: list) -> dict:
    if not is_dataclass(cls):
        raise TypeError(f"The class {cls.__name__} is not a dataclass; kagami can't generate "
                        f"a schema for it.")
    if cls in in_progress:
        raise TypeError(f"The class {cls.__name__} is defined recursively; kagami can't "
                        f"generate a schema for it.")
    in_progress.append(cls)
    props = {}
    jsp_args = {"type": "object", "properties": props}
    required = []
    hints = get_hints(cls)
    table = field_table(cls)
    wire_keys = {spec.attr: spec.wire_key for spec in table.fields.values()}
    is_document = issubclass(cls, KagamiDocumentBase) and len(in_progress) == 1
    for f in fields(cls):
        if f.name not in wire_keys:
            continue
        if is_document and f.name in _ignorable:
            continue
        # if no default, then the field is required
        if f.default is MISSING and f.default_factory is MISSING:
            required.append(wire_keys[f.name])
        prop = _type_schema(peel_optional(hints[f.name]), f.metadata, f.name, in_progress)
        _set_if_non_null(f.metadata, fm.DESCRIPTION_KEY, prop, "description")
        props[wire_keys[f.name]] = prop
    if table.unknown_attr is not None:
        jsp_args["x-kubernetes-preserve-unknown-fields"] = True
    if required:
        jsp_args["required"] = required
    in_progress.pop()
    return jsp_args
