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
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pytest

from kagami import (load_full_yaml, get_processors, get_yaml, get_json, from_json,
                    from_dict, register_version_kind_class, get_version_kind_class,
                    KagamiBase, KagamiDocumentBase, UnknownFormat, DepthExceeded)
from kagami.model.apps_v1 import Deployment
from kagami.model.apiextensions_v1 import (CustomResourceDefinition, JSONSchemaProps,
                                           JSONSchemaPropsOrBool)
from kagami.model.autoscaling_v1 import HorizontalPodAutoscaler
from kagami.model.core_v1 import ConfigMap, Namespace
from kagami.model.meta_v1 import ObjectMeta, Status
from kagami.model.policy_v1 import PodDisruptionBudget

yaml_dir = Path(__file__).parent / "yaml"


def test01():
    """
    load a multi-document file; empty documents are skipped
    """
    docs = load_full_yaml(path=str(yaml_dir / "multi.yaml"))
    assert len(docs) == 4, f"got {len(docs)} docs"
    assert [type(doc) for doc in docs] == [Namespace, ConfigMap, PodDisruptionBudget,
                                           HorizontalPodAutoscaler]


def test02():
    """
    a YAML timestamp in a string map comes back exactly as written
    """
    cm = load_full_yaml(path=str(yaml_dir / "multi.yaml"))[1]
    assert isinstance(cm, ConfigMap)
    assert cm.data["mode"] == "production"
    assert isinstance(cm.data["created"], str), type(cm.data["created"])
    assert cm.data["created"] == "2024-01-01T00:00:00Z", cm.data["created"]


def test03():
    """
    unions inside a multi-document load
    """
    docs = load_full_yaml(path=str(yaml_dir / "multi.yaml"))
    pdb: PodDisruptionBudget = docs[2]
    assert pdb.spec.minAvailable.strVal == "50%"
    hpa: HorizontalPodAutoscaler = docs[3]
    assert hpa.spec.scaleTargetRef.kind == "Deployment"
    assert hpa.spec.targetCPUUtilizationPercentage == 80


def test04():
    """
    load from a stream and from a string
    """
    with open(yaml_dir / "deployment.yaml", "r") as f:
        from_stream = load_full_yaml(stream=f)[0]
    text = (yaml_dir / "deployment.yaml").read_text()
    from_string = load_full_yaml(yaml=text)[0]
    assert from_stream == from_string


def test05():
    """
    get_yaml output loads back to an equal object
    """
    d = load_full_yaml(path=str(yaml_dir / "deployment.yaml"))[0]
    text = get_yaml(d)
    assert text.startswith("---\n")
    again = load_full_yaml(yaml=text)[0]
    assert again == d, again.diff(d)


def test06():
    """
    get_yaml keeps a zero value and an empty list
    """
    d = load_full_yaml(path=str(yaml_dir / "deployment.yaml"))[0]
    text = get_yaml(d)
    assert "replicas: 0" in text
    assert "args: []" in text


def test07():
    """
    sort_keys on YAML output
    """
    jsp = JSONSchemaProps(title="t", _unknown_fields={"aaa": 1})
    unsorted = get_yaml(jsp)
    assert unsorted.index("title") < unsorted.index("aaa")
    in_order = get_yaml(jsp, sort_keys=True)
    assert in_order.index("aaa") < in_order.index("title")


def test08():
    """
    the CRD document survives a round trip, unknown schema keys included
    """
    crd = load_full_yaml(path=str(yaml_dir / "crd.yaml"))[0]
    assert isinstance(crd, CustomResourceDefinition)
    schema = crd.spec.versions[0].schema.openAPIV3Schema
    spec = schema.properties["spec"]
    assert spec.additionalProperties == JSONSchemaPropsOrBool(allows=False)
    assert spec.properties["tags"].items.schema.type == "string"
    template = spec.properties["template"]
    assert template.dollar_ref == "#/definitions/template"
    assert template.x_kubernetes_preserve_unknown_fields is True
    assert template._unknown_fields == {"x-vendor-hint": "keep-me"}
    assert spec.properties["replicas"].default == 1
    assert spec.properties["port"].x_kubernetes_int_or_string is True
    assert schema.properties["status"].additionalProperties.schema.type == "string"
    assert schema.x_kubernetes_validations[0].rule == "self.spec.replicas <= 10"
    again = load_full_yaml(yaml=get_yaml(crd))[0]
    assert again == crd, again.diff(crd)


def test09():
    """
    an empty object stays an empty object
    """
    crd = load_full_yaml(path=str(yaml_dir / "crd.yaml"))[0]
    subs = crd.spec.versions[0].subresources
    assert subs.status is not None
    assert crd.to_dict()["spec"]["versions"][0]["subresources"]["status"] == {}


def test10():
    """
    from_json finds the class from apiVersion/kind
    """
    d = load_full_yaml(path=str(yaml_dir / "deployment.yaml"))[0]
    again = from_json(get_json(d))
    assert isinstance(again, Deployment)
    assert again == d
    meta = from_json(get_json(d.metadata), cls=ObjectMeta)
    assert meta == d.metadata


def test11():
    """
    from_json needs an object
    """
    with pytest.raises(UnknownFormat):
        from_json("[1, 2]")


def test12():
    """
    from_dict argument checks
    """
    with pytest.raises(TypeError):
        from_dict([])
    with pytest.raises(TypeError):
        from_dict({}, cls=ObjectMeta())
    with pytest.raises(TypeError):
        from_dict({}, cls=dict)


def test13():
    """
    an unrecognised apiVersion/kind can't be loaded
    """
    try:
        load_full_yaml(yaml="apiVersion: nowhere.example.com/v9\nkind: Ghost\n")
        assert False, "should have raised"
    except RuntimeError as e:
        assert "Ghost" in str(e)


def test14():
    """
    load_full_yaml needs a source, and documents must be mappings
    """
    with pytest.raises(RuntimeError):
        load_full_yaml()
    with pytest.raises(RuntimeError):
        load_full_yaml(yaml="- a\n- b\n")


def test15():
    """
    get_processors returns the parsed documents
    """
    docs = get_processors(path=str(yaml_dir / "multi.yaml"))
    assert len(docs) == 4
    assert docs[0]["kind"] == "Namespace"
    assert Namespace.from_yaml(docs[0]).metadata.name == "shop"


def test16():
    """
    Status and other meta documents are found under plain 'v1'
    """
    assert get_version_kind_class("v1", "Status") is Status
    assert get_version_kind_class("v1", "Namespace") is Namespace
    assert get_version_kind_class("apps/v1", "Ghost") is None
    assert get_version_kind_class("nowhere.example.com/v1", "Ghost") is None


@dataclass
class CronTabSpec(KagamiBase):
    cronSpec: Optional[str] = None
    image: Optional[str] = None
    replicas: Optional[int] = None


@dataclass
class CronTab(KagamiDocumentBase):
    apiVersion: Optional[str] = "stable.example.com/v1"
    kind: Optional[str] = "CronTab"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[CronTabSpec] = None


@dataclass
class CronTabList(KagamiDocumentBase):
    apiVersion: Optional[str] = "stable.example.com/v1"
    kind: Optional[str] = "CronTabList"
    items: Optional[List[CronTab]] = None


def test17():
    """
    register a custom resource and load it
    """
    assert register_version_kind_class(CronTab, CronTab.apiVersion, CronTab.kind) is None
    register_version_kind_class(CronTabList, CronTabList.apiVersion, CronTabList.kind)
    docs = load_full_yaml(yaml="""
apiVersion: stable.example.com/v1
kind: CronTabList
items:
  - apiVersion: stable.example.com/v1
    kind: CronTab
    metadata:
      name: nightly
    spec:
      cronSpec: "0 3 * * *"
      replicas: 1
""")
    assert isinstance(docs[0], CronTabList)
    ct = docs[0].items[0]
    assert isinstance(ct, CronTab)
    assert ct.spec.cronSpec == "0 3 * * *"


def test18():
    """
    a subclass registered for a standard kind replaces the standard class
    """
    @dataclass
    class MyDeployment(Deployment):
        def replica_count(self) -> int:
            return self.spec.replicas or 0

    old = register_version_kind_class(MyDeployment, Deployment.apiVersion,
                                      Deployment.kind)
    try:
        assert old is Deployment, old
        d = load_full_yaml(path=str(yaml_dir / "deployment.yaml"))[0]
        assert isinstance(d, MyDeployment)
        assert d.replica_count() == 0
    finally:
        register_version_kind_class(Deployment, Deployment.apiVersion, Deployment.kind)
    assert get_version_kind_class("apps/v1", "Deployment") is Deployment


def test19():
    """
    only documents with apiVersion and kind can be registered
    """
    with pytest.raises(TypeError):
        register_version_kind_class(CronTabSpec, "stable.example.com/v1", "CronTabSpec")

    @dataclass
    class NoKind(KagamiDocumentBase):
        apiVersion: Optional[str] = "stable.example.com/v1"

    with pytest.raises(TypeError):
        register_version_kind_class(NoKind, "stable.example.com/v1", "NoKind")


def test20():
    """
    from_json without a class reports text too deep to parse as DepthExceeded
    """
    text = ('{"apiVersion": "v1", "kind": "Status", "details": '
            + "[" * 200000 + "]" * 200000 + "}")
    with pytest.raises(DepthExceeded):
        from_json(text)


def test21():
    """
    a malformed apiVersion is just an unrecognised one
    """
    assert get_version_kind_class("a/b/c", "Thing") is None
    assert get_version_kind_class("apps/", "Deployment") is None
    with pytest.raises(RuntimeError):
        load_full_yaml(yaml="apiVersion: a/b/c\nkind: Thing\n")
    with pytest.raises(RuntimeError):
        from_dict({"apiVersion": "a/b/c", "kind": "Thing"})


def test22():
    """
    get_processors leaves timestamps as text
    """
    docs = get_processors(yaml="a: 2025-01-02T03:04:05.1Z\n---\nb: 2024-01-01\n")
    assert docs == [{"a": "2025-01-02T03:04:05.1Z"}, {"b": "2024-01-01"}], docs


if __name__ == "__main__":
    the_tests = {k: v for k, v in globals().items()
                 if k.startswith('test') and callable(v)}
    for k, v in the_tests.items():
        try:
            v()
        except Exception as e:
            print(f'{k} failed with {str(e)}')
