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
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest

from kagami import (KagamiBase, KagamiDocumentBase, FieldMetadata as FM, Quantity,
                    Time, get_crd_schema, get_clean_dict, get_yaml, load_full_yaml,
                    unknown_fields_slot, wire_field)
from kagami.model.apiextensions_v1 import (CustomResourceDefinition,
                                           CustomResourceDefinitionNames,
                                           CustomResourceDefinitionSpec,
                                           CustomResourceDefinitionVersion,
                                           CustomResourceValidation, JSONSchemaProps,
                                           JSONSchemaPropsOrBool)
from kagami.model.meta_v1 import IntOrString, ObjectMeta


@dataclass
class WidgetSpec(KagamiBase):
    size: int
    color: Optional[str] = field(default=None,
                                 metadata=FM(enum=["red", "blue"], description="paint"))
    tags: Optional[List[str]] = field(default=None,
                                      metadata=FM(min_items=1, unique_items=True))
    limits: Optional[Dict[str, Quantity]] = None
    started: Optional[Time] = None
    port: Optional[IntOrString] = None
    extra: Optional[Any] = None
    ratio: Optional[float] = field(default=None, metadata=FM(minimum=0.0, maximum=1.0))
    name: Optional[str] = field(default=None, metadata=FM(pattern="^[a-z]+$"))
    ref: Optional[str] = wire_field("$ref")
    enabled: Optional[bool] = field(default=None, metadata=FM(enum=[True]))


@dataclass
class Widget(KagamiDocumentBase):
    spec: WidgetSpec
    apiVersion: Optional[str] = "example.com/v1"
    kind: Optional[str] = "Widget"
    metadata: Optional[ObjectMeta] = None


widget_spec_schema = {
    "type": "object",
    "properties": {
        "size": {"type": "integer"},
        "color": {"type": "string", "enum": ["red", "blue"], "description": "paint"},
        "tags": {"type": "array", "minItems": 1, "uniqueItems": True,
                 "items": {"type": "string"}},
        "limits": {"type": "object",
                   "additionalProperties": {"x-kubernetes-int-or-string": True}},
        "started": {"type": "string", "format": "date-time"},
        "port": {"x-kubernetes-int-or-string": True},
        "extra": {"x-kubernetes-preserve-unknown-fields": True},
        "ratio": {"type": "number", "minimum": 0.0, "maximum": 1.0},
        "name": {"type": "string", "pattern": "^[a-z]+$"},
        "$ref": {"type": "string"},
        "enabled": {"type": "boolean"},
    },
    "required": ["size"],
}


@dataclass
class Node(KagamiBase):
    name: Optional[str] = None
    children: Optional[List["Node"]] = None


@dataclass
class Loose(KagamiBase):
    name: Optional[str] = None
    _unknown_fields: Dict[str, Any] = unknown_fields_slot()


@dataclass
class HasOtherUnion(KagamiBase):
    extra: Optional[JSONSchemaPropsOrBool] = None


class NotADataclass(object):
    pass


def test01():
    """
    get a schema for a plain object class
    """
    jsp = get_crd_schema(WidgetSpec)
    assert isinstance(jsp, JSONSchemaProps)
    assert get_clean_dict(jsp) == widget_spec_schema, get_clean_dict(jsp)


def test02():
    """
    a document's schema leaves out apiVersion, kind and metadata
    """
    jsp = get_crd_schema(Widget)
    d = get_clean_dict(jsp)
    assert set(d["properties"].keys()) == {"spec"}, d["properties"].keys()
    assert d["required"] == ["spec"]
    assert d["properties"]["spec"] == widget_spec_schema


def test03():
    """
    the wire key is used, not the attribute name
    """
    jsp = get_crd_schema(WidgetSpec)
    assert "$ref" in jsp.properties
    assert "ref" not in jsp.properties


def test04():
    """
    a class that keeps unknown keys preserves unknown fields
    """
    jsp = get_crd_schema(Loose)
    assert jsp.x_kubernetes_preserve_unknown_fields is True
    assert get_clean_dict(jsp)["properties"] == {"name": {"type": "string"}}
    assert jsp.required is None


def test05():
    """
    recursive classes can't be described
    """
    with pytest.raises(TypeError):
        get_crd_schema(Node)


def test06():
    """
    only IntOrString is accepted among unions
    """
    with pytest.raises(TypeError):
        get_crd_schema(HasOtherUnion)


def test07():
    """
    the class must be a dataclass, and jsp_class a JSONSchemaProps
    """
    with pytest.raises(TypeError):
        get_crd_schema(NotADataclass)
    with pytest.raises(TypeError):
        get_crd_schema(WidgetSpec, jsp_class=ObjectMeta)
    assert isinstance(get_crd_schema(WidgetSpec, jsp_class=JSONSchemaProps),
                      JSONSchemaProps)


def test08():
    """
    a generated schema goes into a CRD that survives YAML
    """
    crd = CustomResourceDefinition(
        metadata=ObjectMeta(name="widgets.example.com"),
        spec=CustomResourceDefinitionSpec(
            group="example.com",
            scope="Namespaced",
            names=CustomResourceDefinitionNames(kind="Widget", plural="widgets",
                                                singular="widget"),
            versions=[CustomResourceDefinitionVersion(
                name="v1", served=True, storage=True,
                schema=CustomResourceValidation(openAPIV3Schema=get_crd_schema(Widget)))]))
    again = load_full_yaml(yaml=get_yaml(crd))[0]
    assert again == crd, again.diff(crd)
    schema = again.spec.versions[0].schema.openAPIV3Schema
    assert schema.properties["spec"].properties["size"].type == "integer"


if __name__ == "__main__":
    the_tests = {k: v for k, v in globals().items()
                 if k.startswith('test') and callable(v)}
    for k, v in the_tests.items():
        try:
            v()
        except Exception as e:
            print(f'{k} failed with {str(e)}')
