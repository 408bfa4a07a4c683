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
Registry mapping (apiVersion, kind) pairs to the classes kagami instantiates

The model modules are imported lazily the first time a class from their
apiVersion is requested; user classes (custom resources, or subclasses of the
standard documents) can be registered to take the place of or extend the
standard set.
"""
import importlib
from dataclasses import fields, MISSING
from typing import Dict, Optional
from kagami.meta import KagamiDocumentBase
from kagami.naming import process_api_version, model_module_name, make_api_version

_version_kind_class_cache: Dict[str, Dict[str, type]] = {}

_loaded_modules = set()


def _field_default(cls, name: str) -> Optional[str]:
    for f in fields(cls):
        if f.name == name:
            return f.default if f.default is not MISSING else None
    return None


def _normalise(api_version: str) -> str:
    group, version = process_api_version(api_version)
    return make_api_version(group, version)


def register_version_kind_class(cls: type, api_version: str,
                                kind: str) -> Optional[type]:
    """
    Register a class for kagami to instantiate based on apiVersion/kind

    This function allows you to register a dataclass for kagami to instantiate
    whenever it encounters the specified values in the 'apiVersion' and 'kind'
    fields of a YAML, JSON or dict representation of a K8s object, or in a
    response from the API server. The class must be a subclass of
    KagamiDocumentBase; either a direct subclass (useful for custom resources)
    or a subclass of an existing document class such as Deployment.

    If subclassing an existing class, supply the same apiVersion and kind that
    the original uses, most simply by referring to the defaults on the base:

    ``register_version_kind_class(MyDeployment, Deployment.apiVersion, Deployment.kind)``

    Now whenever kagami needs to create a Deployment it will instantiate
    MyDeployment instead.

    A custom resource class needs apiVersion and kind fields of its own, and
    any contained objects as KagamiBase dataclasses:

    .. code:: python

        @dataclass
        class PostgresSpec(KagamiBase):
            teamId: Optional[str] = None
            numberOfInstances: Optional[int] = None

        @dataclass
        class Postgres(KagamiDocumentBase):
            apiVersion: Optional[str] = 'acid.zalan.do/v1'
            kind: Optional[str] = 'postgresql'
            metadata: Optional[ObjectMeta] = None
            spec: Optional[PostgresSpec] = None

        register_version_kind_class(Postgres, Postgres.apiVersion, Postgres.kind)

    :param cls: a class object which is a subclass of KagamiDocumentBase
    :param api_version: string; the full apiVersion, such as 'apps/v1'
    :param kind: string; the kind of object this is
    :raises TypeError: if the provided class is not a subclass of
        KagamiDocumentBase, or if the class doesn't have apiVersion and kind
        fields
    :return: If replacing an existing class, the previously registered class
        is returned. If a new class, then None is returned.
    """
    if not isinstance(cls, type) or not issubclass(cls, KagamiDocumentBase):
        raise TypeError("The class to register must be a KagamiDocumentBase "
                        "subclass")
    fset = {f.name for f in fields(cls)}
    if 'apiVersion' not in fset or 'kind' not in fset:
        raise TypeError("The class must have both apiVersion and kind "
                        "attributes")
    old_cls = get_version_kind_class(api_version, kind)
    kind_dict = _version_kind_class_cache.setdefault(_normalise(api_version), {})
    kind_dict[kind] = cls
    return old_cls


def _load_module(group: str, version: str):
    modname = f"kagami.model.{model_module_name(group, version)}"
    if modname in _loaded_modules:
        return
    _loaded_modules.add(modname)
    try:
        mod = importlib.import_module(modname)
    except ModuleNotFoundError as e:
        if e.name != modname:
            raise
        return
    for o in vars(mod).values():
        if (isinstance(o, type) and issubclass(o, KagamiDocumentBase) and
                o is not KagamiDocumentBase and o.__module__ == modname):
            o_version = _field_default(o, 'apiVersion')
            o_kind = _field_default(o, 'kind')
            if o_version is None or o_kind is None:
                continue  # pragma: no cover
            kind_dict = _version_kind_class_cache.setdefault(_normalise(o_version), {})
            # registered user classes take priority
            kind_dict.setdefault(o_kind, o)


def get_version_kind_class(api_version: str, kind: str) -> Optional[type]:
    """
    Return the class registered for an apiVersion/kind pair

    :param api_version: string; the full apiVersion of a document, such as
        'v1', 'apps/v1' or 'apiextensions.k8s.io/v1'
    :param kind: string; value of the 'kind' field of a document; the same as
        the name of the class that models the document
    :return: a KagamiDocumentBase subclass, or None if the pair is unknown or
        api_version isn't a well-formed apiVersion

    NOTE: this function does lazy loading of modules in order to avoid
        dependency loops and speed startup. Hence the first time a kind is
        requested from a version the function may run a bit longer as it loads
        up the needed modules and processes its symbols
    """
    try:
        group, version = process_api_version(api_version)
    except ValueError:
        return None
    _load_module(group, version)
    if group == "core":
        # Status, APIResourceList and friends are served as plain 'v1'
        _load_module("meta", version)
    kind_dict = _version_kind_class_cache.get(make_api_version(group, version), {})
    return kind_dict.get(kind)
