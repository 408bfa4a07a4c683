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
import datetime
import importlib
from pathlib import Path

import pytest

from kagami import (load_full_yaml, get_python_source, DiffType, DiffDetail,
                    get_clean_dict)
from kagami.model import model_modules
from kagami.model.apps_v1 import (Deployment, DeploymentSpec, RollingUpdateDeployment)
from kagami.model.apiextensions_v1 import JSONSchemaProps, JSONSchemaPropsOrBool
from kagami.model.core_v1 import Container, ContainerPort, Pod
from kagami.model.meta_v1 import IntOrString, ObjectMeta

yaml_dir = Path(__file__).parent / "yaml"

# everything generated source may refer to
source_namespace = {"datetime": datetime}
for modname in model_modules:
    source_namespace.update(vars(importlib.import_module(f"kagami.model.{modname}")))

d: Deployment = None


def setup_module():
    global d
    d = load_full_yaml(path=str(yaml_dir / "deployment.yaml"))[0]


def test01():
    """
    an empty document keeps its apiVersion and kind
    """
    e = Deployment.get_empty_instance()
    assert e.apiVersion == "apps/v1"
    assert e.kind == "Deployment"
    assert e.metadata is None and e.spec is None
    assert e.to_dict() == {"apiVersion": "apps/v1", "kind": "Deployment"}


def test02():
    """
    dup makes an equal but independent copy
    """
    copy = d.dup()
    assert copy == d
    assert copy is not d
    assert copy.spec.template.spec.containers[0] is not d.spec.template.spec.containers[0]
    copy.metadata.labels["tier"] = "backend"
    assert d.metadata.labels["tier"] == "frontend", "dup shared the labels dict"


def test03():
    """
    dup copies unions and unknown keys
    """
    jsp = JSONSchemaProps(additionalProperties=JSONSchemaPropsOrBool(allows=True),
                          _unknown_fields={"x-extra": [1, 2]})
    copy = jsp.dup()
    assert copy == jsp
    assert copy.additionalProperties is not jsp.additionalProperties
    copy._unknown_fields["x-extra"].append(3)
    assert jsp._unknown_fields["x-extra"] == [1, 2]


def test04():
    """
    identical objects have no diffs
    """
    assert d.diff(d.dup()) == []


def test05():
    """
    a changed value is reported with its path
    """
    copy = d.dup()
    copy.spec.revisionHistoryLimit = 5
    diffs = d.diff(copy)
    assert len(diffs) == 1, diffs
    diff: DiffDetail = diffs[0]
    assert diff.diff_type == DiffType.VALUE_CHANGED
    assert diff.path == ["spec", "revisionHistoryLimit"]
    assert diff.attrname == "revisionHistoryLimit"
    assert diff.formatted_path == "Deployment.spec.revisionHistoryLimit"
    assert diff.value == 10 and diff.other_value == 5
    assert diff.cls is DeploymentSpec
    assert d.object_at_path(diff.path) == 10


def test06():
    """
    unset and zero are different
    """
    copy = d.dup()
    copy.spec.replicas = None
    diffs = d.diff(copy)
    assert [x.diff_type for x in diffs] == [DiffType.ADDED], diffs
    diffs = copy.diff(d)
    assert [x.diff_type for x in diffs] == [DiffType.REMOVED], diffs


def test07():
    """
    switching a union's alternative is a type change
    """
    copy = d.dup()
    copy.spec.strategy.rollingUpdate.maxSurge = IntOrString(intVal=2)
    diffs = d.diff(copy)
    assert len(diffs) == 1, diffs
    assert diffs[0].diff_type == DiffType.TYPE_CHANGED
    assert diffs[0].path == ["spec", "strategy", "rollingUpdate", "maxSurge"]


def test08():
    """
    changing the value inside the same alternative is a value change
    """
    copy = d.dup()
    copy.spec.strategy.rollingUpdate.maxSurge = IntOrString(strVal="50%")
    diffs = d.diff(copy)
    assert [x.diff_type for x in diffs] == [DiffType.VALUE_CHANGED]
    assert diffs[0].value == "30%"


def test09():
    """
    list length changes and dict key changes
    """
    copy = d.dup()
    copy.spec.template.spec.containers.pop()
    copy.metadata.labels["extra"] = "yes"
    kinds = {x.diff_type for x in d.diff(copy)}
    assert kinds == {DiffType.LIST_LENGTH_CHANGED, DiffType.REMOVED}, kinds


def test10():
    """
    different classes can't be compared
    """
    diffs = d.diff(Pod())
    assert len(diffs) == 1
    assert diffs[0].diff_type == DiffType.INCOMPATIBLE_DIFF


def test11():
    """
    time values compare as values
    """
    copy = d.dup()
    copy.metadata.creationTimestamp += datetime.timedelta(seconds=1)
    diffs = d.diff(copy)
    assert [x.path for x in diffs] == [["metadata", "creationTimestamp"]]


def test12():
    """
    object_at_path walks attributes, list indices, dict keys and unions
    """
    assert d.object_at_path(["spec", "template", "spec", "containers", 1,
                             "name"]) == "sidecar"
    assert d.object_at_path(["metadata", "labels", "app"]) == "web"
    port = d.object_at_path(["spec", "template", "spec", "containers", "0",
                             "readinessProbe", "httpGet", "port"])
    assert port == IntOrString(strVal="http")
    jsp = JSONSchemaProps(additionalProperties=JSONSchemaPropsOrBool(
        schema=JSONSchemaProps(type="string")))
    assert jsp.object_at_path(["additionalProperties", "type"]) == "string"
    other = jsp.dup()
    other.additionalProperties.schema.type = "integer"
    diffs = jsp.diff(other)
    assert diffs[0].path == ["additionalProperties", "type"], diffs[0].path
    assert jsp.object_at_path(diffs[0].path) == "string"


def test13():
    """
    object_at_path failures
    """
    with pytest.raises(RuntimeError):
        d.object_at_path(["status", "replicas"])
    with pytest.raises(IndexError):
        d.object_at_path(["spec", "template", "spec", "containers", 5])
    with pytest.raises(ValueError):
        d.object_at_path(["spec", "template", "spec", "containers", "first"])
    with pytest.raises(AttributeError):
        d.object_at_path(["spec", "nope"])


def test14():
    """
    merge fills in unset fields and leaves set ones alone
    """
    target = ObjectMeta(name="a", labels={"x": "1"})
    source = ObjectMeta(name="b", namespace="ns", labels={"x": "2", "y": "3"},
                        generation=0)
    target.merge(source)
    assert target.name == "a"
    assert target.namespace == "ns"
    assert target.labels == {"x": "1", "y": "3"}, target.labels
    assert target.generation == 0, "a zero is a value to merge"


def test15():
    """
    merge with overwrite takes everything from the other object, unset fields too
    """
    target = ObjectMeta(name="a", uid="u-1")
    target.merge(ObjectMeta(name="b"), overwrite=True)
    assert target.name == "b"
    assert target.uid is None


def test16():
    """
    merge goes into nested objects and lists
    """
    target = Container(name="web", ports=[ContainerPort(containerPort=80)])
    source = Container(image="nginx", ports=[ContainerPort(containerPort=81, name="http"),
                                             ContainerPort(containerPort=443)])
    target.merge(source)
    assert target.image == "nginx"
    assert target.ports[0] == ContainerPort(containerPort=80, name="http")
    assert target.ports[1].containerPort == 443
    source.ports[1].containerPort = 8443
    assert target.ports[1].containerPort == 443, "merge didn't copy the new item"


def test17():
    """
    merge replaces a union rather than mixing alternatives
    """
    target = RollingUpdateDeployment(maxSurge=IntOrString(intVal=1))
    target.merge(RollingUpdateDeployment(maxSurge=IntOrString(strVal="10%"),
                                         maxUnavailable=IntOrString(intVal=0)))
    assert target.maxSurge == IntOrString(intVal=1)
    assert target.maxUnavailable == IntOrString(intVal=0)
    target.merge(RollingUpdateDeployment(maxSurge=IntOrString(strVal="10%")),
                 overwrite=True)
    assert target.maxSurge == IntOrString(strVal="10%")
    assert target.maxUnavailable is None


def test18():
    """
    merge refuses objects of another class
    """
    with pytest.raises(TypeError):
        ObjectMeta().merge(Container())


def test19():
    """
    process() replaces an object's contents from a mapping
    """
    e = Deployment.get_empty_instance()
    e.process(get_clean_dict(d))
    assert e == d
    e.process({"apiVersion": "apps/v1", "kind": "Deployment"})
    assert e.spec is None


def test20():
    """
    generated source re-creates the object
    """
    code = d.as_python_source()
    assert code.startswith("Deployment(")
    x = eval(code, source_namespace)
    assert x == d, "the two aren't the same"


def test21():
    """
    generated source for a union names the populated alternative
    """
    assert IntOrString(strVal="30%").as_python_source() == "IntOrString(strVal='30%')"
    assert IntOrString(intVal=3).as_python_source(assign_to="x") == "x = IntOrString(intVal=3)"


def test22():
    """
    generated source keeps unknown keys and wire-renamed fields
    """
    jsp = JSONSchemaProps(dollar_ref="#/x", not_=JSONSchemaProps(type="string"),
                          _unknown_fields={"x-extra": {"a": [1]}})
    x = eval(jsp.as_python_source(), source_namespace)
    assert x == jsp


def test23():
    """
    get_python_source with no style
    """
    code = get_python_source(d, assign_to="x")
    assert code.startswith("x = Deployment(")
    ns = dict(source_namespace)
    exec(code, ns)
    assert ns["x"] == d


def test24():
    """
    get_python_source with the black style
    """
    code = get_python_source(d, assign_to="x", style="black")
    assert "\n" in code.strip(), "black should have spread the code out"
    ns = dict(source_namespace)
    exec(code, ns)
    assert ns["x"] == d


def test25():
    """
    get_python_source with the autopep8 style
    """
    code = get_python_source(d, assign_to="x", style="autopep8")
    ns = dict(source_namespace)
    exec(code, ns)
    assert ns["x"] == d


def test26():
    """
    get_python_source rejects unknown styles
    """
    with pytest.raises(RuntimeError):
        get_python_source(d, style="yapf")


def test27():
    """
    a modified copy made from source isn't equal
    """
    x = eval(d.as_python_source(), source_namespace)
    x.spec.template.spec.containers[1].image = "alpine"
    assert x != d


def test28():
    """
    to_dict can sort keys
    """
    jsp = JSONSchemaProps(type="object", _unknown_fields={"a-first": True})
    assert list(jsp.to_dict().keys()) == ["type", "a-first"]
    assert list(jsp.to_dict(sort_keys=True).keys()) == ["a-first", "type"]


if __name__ == "__main__":
    setup_module()
    the_tests = {k: v for k, v in globals().items()
                 if k.startswith('test') and callable(v)}
    for k, v in the_tests.items():
        try:
            v()
        except Exception as e:
            print(f'{k} failed with {str(e)}')
