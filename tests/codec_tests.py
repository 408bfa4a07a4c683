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
import json
from pathlib import Path

import pytest

from kagami import (decode, encode, get_json, load_full_yaml, get_clean_dict,
                    TypeMismatch, UnionNoMatch, DepthExceeded, UnknownFormat,
                    EncodeError, DecodeError)
from kagami.codec import decode_object, decode_value, field_table, parse_text
from kagami.model.apps_v1 import (Deployment, DeploymentSpec, RollingUpdateDeployment)
from kagami.model.apiextensions_v1 import (JSONSchemaProps, JSONSchemaPropsOrBool,
                                           JSONSchemaPropsOrArray)
from kagami.model.coordination_v1 import Lease, LeaseSpec
from kagami.model.core_v1 import LocalObjectReference, ResourceRequirements
from kagami.model.meta_v1 import IntOrString, ObjectMeta, RawExtension

yaml_dir = Path(__file__).parent / "yaml"

d: Deployment = None


def setup_module():
    global d
    docs = load_full_yaml(path=str(yaml_dir / "deployment.yaml"))
    d = docs[0]


def nested_schema(levels: int) -> dict:
    doc = {"type": "object"}
    for _ in range(levels):
        doc = {"not": doc}
    return doc


def test01():
    """
    load a deployment and check the basics survived
    """
    assert isinstance(d, Deployment)
    assert d.metadata.name == "web", d.metadata.name
    assert d.metadata.labels == {"app": "web", "tier": "frontend"}
    assert d.spec.template.spec.containers[0].image == "nginx:1.27"
    assert d.status is None, "status was never in the document"


def test02():
    """
    a zero-valued field is set and is written back out
    """
    assert d.spec.replicas == 0, f"replicas is {d.spec.replicas}"
    out = get_clean_dict(d)
    assert out["spec"]["replicas"] == 0
    assert "status" not in out


def test03():
    """
    decoding an empty mapping leaves every field unset
    """
    spec = decode({}, DeploymentSpec)
    assert spec.replicas is None
    assert encode(spec) == {}, encode(spec)


def test04():
    """
    absent and zero decode differently and encode differently
    """
    absent = decode({}, DeploymentSpec)
    zero = decode({"replicas": 0}, DeploymentSpec)
    assert zero.replicas == 0
    assert absent != zero
    assert "replicas" not in encode(absent)
    assert encode(zero) == {"replicas": 0}


def test05():
    """
    a JSON null is the same as the key being absent
    """
    spec = decode('{"replicas": null, "paused": false}', DeploymentSpec)
    assert spec.replicas is None
    assert spec.paused is False
    assert encode(spec) == {"paused": False}


def test06():
    """
    a string maxSurge populates the string alternative
    """
    ru = decode({"maxSurge": "30%"}, RollingUpdateDeployment)
    assert isinstance(ru.maxSurge, IntOrString)
    assert ru.maxSurge.strVal == "30%"
    assert ru.maxSurge.intVal is None
    assert ru.maxSurge.arm == "strVal"
    assert encode(ru) == {"maxSurge": "30%"}, "a union must encode as its raw value"


def test07():
    """
    an integer maxSurge populates the int alternative
    """
    ru = decode({"maxSurge": 3}, RollingUpdateDeployment)
    assert ru.maxSurge.intVal == 3
    assert ru.maxSurge.strVal is None
    assert encode(ru) == {"maxSurge": 3}


def test08():
    """
    the loaded deployment has both forms in its rolling update
    """
    ru = d.spec.strategy.rollingUpdate
    assert ru.maxSurge == IntOrString(strVal="30%")
    assert ru.maxUnavailable == IntOrString(intVal=1)
    probe = d.spec.template.spec.containers[0].readinessProbe
    assert probe.httpGet.port.strVal == "http"
    assert d.spec.template.spec.containers[0].livenessProbe.tcpSocket.port.intVal == 80


def test09():
    """
    a list can't be an IntOrString
    """
    try:
        decode({"maxSurge": [1]}, RollingUpdateDeployment)
        assert False, "should have raised"
    except UnionNoMatch as e:
        assert e.field == "maxSurge", e.field
        assert e.union_name == "IntOrString"
        assert e.actual == "array"
        assert e.alternatives == ("intVal", "strVal")


def test10():
    """
    a bool doesn't satisfy either arm of IntOrString
    """
    with pytest.raises(UnionNoMatch):
        decode({"maxUnavailable": True}, RollingUpdateDeployment)


def test11():
    """
    JSONSchemaPropsOrBool takes a bool as a bool and a mapping as a schema
    """
    jsp = decode({"additionalProperties": False}, JSONSchemaProps)
    assert jsp.additionalProperties == JSONSchemaPropsOrBool(allows=False)
    assert encode(jsp) == {"additionalProperties": False}
    jsp = decode({"additionalProperties": {"type": "string"}}, JSONSchemaProps)
    assert jsp.additionalProperties.allows is None
    assert jsp.additionalProperties.schema.type == "string"
    assert encode(jsp) == {"additionalProperties": {"type": "string"}}


def test12():
    """
    JSONSchemaPropsOrArray takes either one schema or a list of them
    """
    one = decode({"items": {"type": "integer"}}, JSONSchemaProps)
    assert one.items.schema.type == "integer"
    many = decode({"items": [{"type": "integer"}, {"type": "string"}]}, JSONSchemaProps)
    assert isinstance(many.items, JSONSchemaPropsOrArray)
    assert [s.type for s in many.items.JSONSchemas] == ["integer", "string"]
    assert encode(many) == {"items": [{"type": "integer"}, {"type": "string"}]}


def test13():
    """
    a strict class drops keys it doesn't know
    """
    ref = decode({"unknownField": 1, "name": "x"}, LocalObjectReference)
    assert ref.name == "x"
    assert encode(ref) == {"name": "x"}, encode(ref)


def test14():
    """
    an extensible class keeps keys it doesn't know and writes them back
    """
    jsp = decode({"unknownField": 1, "title": "x"}, JSONSchemaProps)
    assert jsp.title == "x"
    assert jsp._unknown_fields == {"unknownField": 1}
    assert encode(jsp) == {"title": "x", "unknownField": 1}


def test15():
    """
    RawExtension holds any object verbatim
    """
    raw = {"apiVersion": "example.com/v1", "kind": "Thing",
           "spec": {"sizes": [1, 2.5, None, True], "nested": {"a": "b"}}}
    ext = decode(raw, RawExtension)
    assert encode(ext) == raw


def test16():
    """
    nesting below the depth limit decodes
    """
    jsp = decode(nested_schema(4), JSONSchemaProps, max_depth=5)
    level = 0
    while jsp.not_ is not None:
        jsp = jsp.not_
        level += 1
    assert level == 4, f"found {level} levels"
    assert jsp.type == "object"


def test17():
    """
    nesting at or beyond the depth limit fails
    """
    for levels in (5, 6, 20):
        try:
            decode(nested_schema(levels), JSONSchemaProps, max_depth=5)
            assert False, f"{levels} levels should have failed"
        except DepthExceeded as e:
            assert e.max_depth == 5
            assert isinstance(e, DecodeError)


def test18():
    """
    the depth guard also applies to JSON text
    """
    text = json.dumps(nested_schema(3))
    assert decode(text, JSONSchemaProps, max_depth=4).not_.not_.not_.type == "object"
    with pytest.raises(DepthExceeded):
        decode(text, JSONSchemaProps, max_depth=3)


def test19():
    """
    the default limit is 100 levels
    """
    _ = decode(nested_schema(99), JSONSchemaProps)
    with pytest.raises(DepthExceeded):
        decode(nested_schema(100), JSONSchemaProps)


def test20():
    """
    running out of interpreter stack is reported as DepthExceeded
    """
    with pytest.raises(DepthExceeded):
        decode(nested_schema(5000), JSONSchemaProps, max_depth=100000)


def test21():
    """
    opaque values count against the depth limit too
    """
    deep = {"x": {"y": {"z": {}}}}
    assert encode(decode(deep, RawExtension, max_depth=4)) == deep
    with pytest.raises(DepthExceeded):
        decode(deep, RawExtension, max_depth=3)


def test22():
    """
    MicroTime keeps microseconds through a round trip
    """
    lease = load_full_yaml(path=str(yaml_dir / "lease.yaml"))[0]
    assert isinstance(lease, Lease)
    assert lease.spec.acquireTime.microsecond == 123456
    assert lease.spec.acquireTime.tzinfo is not None
    out = encode(lease)
    assert out["spec"]["acquireTime"] == "2025-01-02T03:04:05.123456Z", \
        out["spec"]["acquireTime"]
    assert out["spec"]["renewTime"] == "2025-01-02T03:04:20.654321Z"


def test23():
    """
    Time truncates fractions of a second
    """
    meta = decode({"creationTimestamp": "2025-01-02T03:04:05.123456Z"}, ObjectMeta)
    assert meta.creationTimestamp.microsecond == 0
    assert encode(meta) == {"creationTimestamp": "2025-01-02T03:04:05Z"}


def test24():
    """
    offsets are normalised to UTC
    """
    meta = decode({"creationTimestamp": "2025-01-02T05:04:05+02:00"}, ObjectMeta)
    assert meta.creationTimestamp == datetime.datetime(2025, 1, 2, 3, 4, 5,
                                                       tzinfo=datetime.timezone.utc)
    assert encode(meta)["creationTimestamp"] == "2025-01-02T03:04:05Z"
    spec = decode({"renewTime": "2025-01-02T03:04:05.5-01:00"}, LeaseSpec)
    assert encode(spec)["renewTime"] == "2025-01-02T04:04:05.500000Z"


def test25():
    """
    text that isn't a timestamp is rejected for a time field
    """
    try:
        decode({"creationTimestamp": "yesterday"}, ObjectMeta)
        assert False, "should have raised"
    except TypeMismatch as e:
        assert e.field == "creationTimestamp"
        assert e.expected == "Time"


def test26():
    """
    $ref is read from and written to its literal key
    """
    jsp = decode({"$ref": "#/definitions/thing", "$schema": "http://x"}, JSONSchemaProps)
    assert jsp.dollar_ref == "#/definitions/thing"
    assert jsp.dollar_schema == "http://x"
    assert jsp._unknown_fields == {}, "$ref must not land with the unknown keys"
    out = encode(jsp)
    assert out == {"$ref": "#/definitions/thing", "$schema": "http://x"}, out
    assert "dollar_ref" not in get_json(jsp)


def test27():
    """
    the field table maps wire keys to attributes
    """
    table = field_table(JSONSchemaProps)
    assert table.fields["$ref"].attr == "dollar_ref"
    assert table.fields["not"].attr == "not_"
    assert table.fields["x-kubernetes-int-or-string"].attr == "x_kubernetes_int_or_string"
    assert "dollar_ref" not in table.fields
    assert table.unknown_attr == "_unknown_fields"
    assert field_table(LocalObjectReference).unknown_attr is None


def test28():
    """
    a type mismatch deep in a document reports the dotted path
    """
    doc = get_clean_dict(d)
    doc["spec"]["template"]["spec"]["containers"][0]["name"] = 5
    try:
        decode(doc, Deployment)
        assert False, "should have raised"
    except TypeMismatch as e:
        assert e.field == "spec.template.spec.containers[0].name", e.field
        assert e.expected == "string"
        assert e.actual == "integer"
        assert str(e).startswith("spec.template.spec.containers[0].name: ")


def test29():
    """
    a bool never satisfies an integer field
    """
    with pytest.raises(TypeMismatch):
        decode({"replicas": True}, DeploymentSpec)
    with pytest.raises(TypeMismatch):
        decode({"replicas": "3"}, DeploymentSpec)


def test30():
    """
    an integer satisfies a number field and keeps its value
    """
    jsp = decode({"minimum": 1, "maximum": 10.5}, JSONSchemaProps)
    assert jsp.minimum == 1 and isinstance(jsp.minimum, int)
    assert jsp.maximum == 10.5
    assert encode(jsp) == {"minimum": 1, "maximum": 10.5}
    with pytest.raises(TypeMismatch):
        decode({"minimum": False}, JSONSchemaProps)


def test31():
    """
    quantities written as YAML numbers become strings
    """
    res = d.spec.template.spec.containers[0].resources
    assert res.limits == {"cpu": "2", "memory": "512Mi"}, res.limits
    assert res.requests["cpu"] == "500m"
    with pytest.raises(TypeMismatch):
        decode({"limits": {"cpu": [2]}}, ResourceRequirements)


def test32():
    """
    an empty list is a set value
    """
    c = d.spec.template.spec.containers[0]
    assert c.args == []
    assert get_clean_dict(c)["args"] == []
    assert d.spec.template.spec.containers[1].args is None


def test33():
    """
    JSON and YAML text, str or bytes, all decode
    """
    assert decode('{"replicas": 2}', DeploymentSpec).replicas == 2
    assert decode(b'{"replicas": 2}', DeploymentSpec).replicas == 2
    assert decode("replicas: 2\npaused: true\n", DeploymentSpec).paused is True
    assert decode(b"replicas: 2\n", DeploymentSpec).replicas == 2


def test34():
    """
    input that isn't a mapping in JSON or YAML is an UnknownFormat
    """
    for bad in ("{not json: [", "- a\n- b\n", "just a string", b"\xff\xfe\x00"):
        try:
            decode(bad, DeploymentSpec)
            assert False, f"{bad!r} should have raised"
        except UnknownFormat:
            pass


def test35():
    """
    sort_keys sorts at every level
    """
    out = encode(d, sort_keys=True)
    assert list(out.keys()) == sorted(out.keys())
    assert list(out["spec"].keys()) == sorted(out["spec"].keys())
    container = out["spec"]["template"]["spec"]["containers"][0]
    assert list(container.keys()) == sorted(container.keys())
    unsorted = encode(d)
    assert list(unsorted.keys()) == ["apiVersion", "kind", "metadata", "spec"]


def test36():
    """
    a union with no alternative set can't be encoded
    """
    ru = RollingUpdateDeployment(maxSurge=IntOrString())
    try:
        encode(ru)
        assert False, "should have raised"
    except EncodeError as e:
        assert e.path == "maxSurge", e.path


def test37():
    """
    a union with two alternatives set can't be made or encoded
    """
    with pytest.raises(ValueError):
        IntOrString(intVal=1, strVal="1")
    ios = IntOrString(intVal=1)
    ios.strVal = "1"
    with pytest.raises(EncodeError):
        encode(RollingUpdateDeployment(maxSurge=ios))


def test38():
    """
    a field holding the wrong kind of value can't be encoded
    """
    try:
        encode(DeploymentSpec(replicas="3"))
        assert False, "should have raised"
    except EncodeError as e:
        assert e.path == "replicas"


def test39():
    """
    misuse of the entry points raises TypeError
    """
    with pytest.raises(TypeError):
        encode({"replicas": 3})
    with pytest.raises(TypeError):
        decode_object(dict, {})


def test40():
    """
    decoding a single value picks the union arm by shape
    """
    assert decode_value(8080, IntOrString) == IntOrString(intVal=8080)
    assert IntOrString.of("http").strVal == "http"
    assert JSONSchemaPropsOrBool.of(True).allows is True


def test41():
    """
    the max_depth argument is checked
    """
    with pytest.raises(ValueError):
        decode({}, DeploymentSpec, max_depth=0)
    with pytest.raises(TypeError):
        decode({}, DeploymentSpec, max_depth="3")


def test42():
    """
    a full round trip through JSON gives back an equal object
    """
    text = get_json(d)
    again = decode(text, Deployment)
    assert again == d, again.diff(d)
    assert get_json(again) == text


def test43():
    """
    timestamp-looking YAML scalars in string maps keep their exact text
    """
    meta = decode("annotations:\n  when: 2025-01-02T03:04:05.1Z\n"
                  "labels:\n  day: 2024-01-01\n", ObjectMeta)
    assert meta.annotations == {"when": "2025-01-02T03:04:05.1Z"}, meta.annotations
    assert meta.labels == {"day": "2024-01-01"}, meta.labels


def test44():
    """
    timestamp-looking YAML scalars in opaque fields keep their exact text
    """
    jsp = decode("type: string\ndefault: 2024-01-01\n"
                 "example: {at: 2024-01-01 10:00:00+02:00}\n", JSONSchemaProps)
    assert jsp.default == "2024-01-01"
    assert jsp.example == {"at": "2024-01-01 10:00:00+02:00"}, jsp.example
    assert encode(jsp)["example"] == {"at": "2024-01-01 10:00:00+02:00"}


def test45():
    """
    an unquoted YAML timestamp still decodes into a Time field
    """
    meta = decode("name: x\ncreationTimestamp: 2025-01-02T03:04:05.9Z\n", ObjectMeta)
    assert meta.creationTimestamp == datetime.datetime(2025, 1, 2, 3, 4, 5,
                                                       tzinfo=datetime.timezone.utc)


def test46():
    """
    more than six fractional digits are cut to microseconds; no offset means UTC
    """
    spec = decode({"acquireTime": "2025-01-02T03:04:05.1234567Z",
                   "renewTime": "2025-01-02T03:04:05"}, LeaseSpec)
    assert spec.acquireTime.microsecond == 123456
    assert spec.renewTime == datetime.datetime(2025, 1, 2, 3, 4, 5,
                                               tzinfo=datetime.timezone.utc)


def test47():
    """
    an impossible date is a mismatch, not a crash
    """
    with pytest.raises(TypeMismatch) as ei:
        decode({"renewTime": "2025-13-40T00:00:00Z"}, LeaseSpec)
    assert ei.value.field == "renewTime"
    assert ei.value.expected == "MicroTime"


def test48():
    """
    parse_text reports text too deep for the parser as DepthExceeded
    """
    deep = "[" * 200000 + "]" * 200000
    with pytest.raises(DepthExceeded) as ei:
        parse_text(deep, max_depth=50)
    assert ei.value.max_depth == 50


if __name__ == "__main__":
    setup_module()
    the_tests = {k: v for k, v in globals().items()
                 if k.startswith('test') and callable(v)}
    for k, v in the_tests.items():
        try:
            v()
        except Exception as e:
            print(f'{k} failed with {str(e)}')
