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
A thin REST client: one method per API endpoint

Endpoints are described by Operation objects held as class attributes of an
ApiGroup subclass (see kagami.api). Looking one up on an instance gives a
method that takes the path parameters and query parameters as keywords:

.. code:: python

    apps = AppsV1Api(Client(KubernetesTransport()))
    dep = apps.read_namespaced_deployment(name="web", namespace="default")
    deps = apps.list_namespaced_deployment(namespace="default", label_selector="app=web")

Request bodies may be model objects or plain dicts; responses are decoded into
the class registered for their apiVersion/kind.

GenericApi gives the same operations for any resource named by group, version
and plural; paginate() and server_side_apply() work with any list or patch
endpoint.
"""
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from kagami.codec import decode_object, parse_text
from kagami.generate import get_clean_dict
from kagami.meta import KagamiBase
from kagami.model.meta_v1 import APIResourceList, Status
from kagami.naming import camel_to_pep8, pep8_to_camel
from kagami.transport import Transport, KubernetesTransport, APPLY_PATCH_CONTENT_TYPE
from kagami.version_kind import get_version_kind_class

logger = logging.getLogger(__name__)

_path_param = re.compile(r"\{(\w+)\}")


class Operation(object):
    """
    One REST endpoint: a verb and a path template with {param} placeholders

    :param verb: str; HTTP method
    :param path: str; path template, e.g.
        /apis/apps/v1/namespaces/{namespace}/deployments/{name}
    :param response: optional class to decode responses into when the
        response's apiVersion/kind isn't registered
    :param body: bool; True if the endpoint requires a request body
    :param description: optional str; used as the bound method's docstring
    """
    def __init__(self, verb: str, path: str, response: Optional[type] = None,
                 body: bool = False, description: Optional[str] = None):
        self.verb = verb.upper()
        self.path = path
        self.response = response
        self.body = body
        self.description = description
        self.name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self

        def endpoint(**params):
            return instance.call(self, **params)
        endpoint.__name__ = self.name or "endpoint"
        endpoint.__doc__ = self.description
        return endpoint

    def __repr__(self):
        return f"Operation({self.verb} {self.path})"

    @property
    def path_params(self) -> List[str]:
        return _path_param.findall(self.path)


@dataclass
class Resource:
    """
    Describes a REST resource for resource_operations()

    :param plural: the resource name in URLs, e.g. 'deployments'
    :param kind: the model class of one object
    :param list_kind: the model class of a list of objects; may be None, in
        which case list responses are decoded by their apiVersion/kind alone
    :param namespaced: False for cluster-scoped resources
    :param subresources: pairs of (subresource name, model class), e.g.
        ('status', Deployment) or ('scale', Scale)
    """
    plural: str
    kind: type
    list_kind: Optional[type]
    namespaced: bool = True
    subresources: Tuple[Tuple[str, type], ...] = ()


def snake_kind(kind: type) -> str:
    """
    Returns the snake_case form of a model class name used in operation names,
    e.g. 'pod_disruption_budget' for PodDisruptionBudget
    """
    name = kind.__name__
    return camel_to_pep8(name[0].lower() + name[1:])


def resource_operations(base_path: str, resource: Resource,
                        status_class: Optional[type] = None) -> Dict[str, Operation]:
    """
    Expands a Resource into the standard set of operations for it

    Names follow the Kubernetes client convention, built from the snake_case
    form of the kind: list_<x>_for_all_namespaces (namespaced resources only),
    list_, create_, delete_collection_, read_, replace_, patch_ and delete_,
    with 'namespaced_' after the verb for namespaced resources, and read_,
    replace_ and patch_ for each subresource with the subresource's name as a
    suffix.

    :param base_path: str; the group/version prefix, e.g. '/apis/apps/v1'
    :param resource: Resource to expand
    :param status_class: optional; class for responses of the delete
        operations, which usually return a Status
    :return: dict of operation name to Operation, in a stable order
    """
    kind_name = resource.kind.__name__
    x = snake_kind(resource.kind)
    ns = "namespaced_" if resource.namespaced else ""
    collection = (f"{base_path}/namespaces/{{namespace}}/{resource.plural}"
                  if resource.namespaced else
                  f"{base_path}/{resource.plural}")
    item = f"{collection}/{{name}}"
    ops = {}
    if resource.namespaced:
        ops[f"list_{x}_for_all_namespaces"] = Operation(
            "GET", f"{base_path}/{resource.plural}", resource.list_kind,
            description=f"list or watch objects of kind {kind_name}")
    ops[f"list_{ns}{x}"] = Operation("GET", collection, resource.list_kind,
                                     description=f"list or watch objects of kind "
                                                 f"{kind_name}")
    ops[f"create_{ns}{x}"] = Operation("POST", collection, resource.kind, body=True,
                                       description=f"create a {kind_name}")
    ops[f"delete_collection_{ns}{x}"] = Operation("DELETE", collection, status_class,
                                                  description=f"delete collection of "
                                                              f"{kind_name}")
    ops[f"read_{ns}{x}"] = Operation("GET", item, resource.kind,
                                     description=f"read the specified {kind_name}")
    ops[f"replace_{ns}{x}"] = Operation("PUT", item, resource.kind, body=True,
                                        description=f"replace the specified {kind_name}")
    ops[f"patch_{ns}{x}"] = Operation("PATCH", item, resource.kind, body=True,
                                      description=f"partially update the specified "
                                                  f"{kind_name}")
    ops[f"delete_{ns}{x}"] = Operation("DELETE", item, status_class,
                                       description=f"delete a {kind_name}")
    for sub, sub_kind in resource.subresources:
        sub_path = f"{item}/{sub}"
        ops[f"read_{ns}{x}_{sub}"] = Operation(
            "GET", sub_path, sub_kind,
            description=f"read {sub} of the specified {kind_name}")
        ops[f"replace_{ns}{x}_{sub}"] = Operation(
            "PUT", sub_path, sub_kind, body=True,
            description=f"replace {sub} of the specified {kind_name}")
        ops[f"patch_{ns}{x}_{sub}"] = Operation(
            "PATCH", sub_path, sub_kind, body=True,
            description=f"partially update {sub} of the specified {kind_name}")
    return ops


def _query_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class Client(object):
    """
    Sends operations through a Transport and decodes the responses

    :param transport: optional Transport; a KubernetesTransport using the
        loaded kubernetes client configuration is made if not supplied
    """
    def __init__(self, transport: Optional[Transport] = None):
        self.transport = transport if transport is not None else KubernetesTransport()

    def call(self, operation: Operation, **params) -> Any:
        """
        Invoke an operation

        Path placeholders are filled from the keyword parameters of the same
        name. 'body' supplies the request body (a model object or a dict) and
        'content_type' overrides the content type of a PATCH. Every other
        keyword parameter with a value other than None becomes a query
        parameter, with its name turned into camelCase (label_selector becomes
        labelSelector).

        :param operation: the Operation to invoke
        :return: the decoded response; a model object if the response's
            apiVersion/kind is registered or the operation names a response
            class, else the parsed JSON
        :raises TypeError: if a path parameter or a required body is missing
        :raises DecodeError: if the response doesn't fit its class
        """
        path = operation.path
        for name in operation.path_params:
            if params.get(name) is None:
                raise TypeError(f"{operation.name}() missing required parameter: '{name}'")
            path = path.replace(f"{{{name}}}", str(params.pop(name)))
        body = params.pop("body", None)
        content_type = params.pop("content_type", None)
        if operation.body and body is None:
            raise TypeError(f"{operation.name}() missing required parameter: 'body'")
        if isinstance(body, KagamiBase):
            body = get_clean_dict(body)
        query = {pep8_to_camel(k): _query_value(v) for k, v in params.items()
                 if v is not None}

        logger.debug("%s: %s %s", operation.name, operation.verb, path)
        verb = operation.verb
        if verb == "GET":
            data = self.transport.get(path, query=query)
        elif verb == "POST":
            data = self.transport.post(path, body, query=query)
        elif verb == "PUT":
            data = self.transport.put(path, body, query=query)
        elif verb == "PATCH":
            data = self.transport.patch(path, body, query=query,
                                        content_type=content_type)
        elif verb == "DELETE":
            data = self.transport.delete(path, body=body, query=query)
        else:
            raise ValueError(f"Unsupported HTTP verb {verb}")
        return self.decode_response(operation, data)

    @staticmethod
    def decode_response(operation: Operation, data: Any) -> Any:
        if isinstance(data, (str, bytes)):
            data = parse_text(data) if data else None
        if not isinstance(data, dict):
            return data
        klass = None
        api_version, kind = data.get("apiVersion"), data.get("kind")
        if isinstance(api_version, str) and isinstance(kind, str):
            klass = get_version_kind_class(api_version, kind)
        if klass is None:
            klass = operation.response
        if klass is None:
            return data
        return decode_object(klass, data)


class ApiGroup(object):
    """
    Base for the per-group API classes

    Subclasses set base_path and list their resources; the standard
    operations for each resource, plus get_api_resources, are added to the
    subclass when it is defined. Extra operations can be declared directly as
    Operation class attributes.
    """
    base_path: str = ""
    resources: List[Resource] = []

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        ops = {"get_api_resources": Operation("GET", f"{cls.base_path}/", APIResourceList,
                                              description="get available resources")}
        for resource in cls.resources:
            ops.update(resource_operations(cls.base_path, resource, status_class=Status))
        for name, op in ops.items():
            if name in cls.__dict__:
                continue
            op.__set_name__(cls, name)
            setattr(cls, name, op)

    def __init__(self, client: Optional[Client] = None):
        self.client = client if client is not None else Client()

    def call(self, operation: Operation, **params) -> Any:
        return self.client.call(operation, **params)

    @classmethod
    def operations(cls) -> Dict[str, Operation]:
        """
        Returns all operations of this group by method name
        """
        return {name: value for name, value in vars(cls).items()
                if isinstance(value, Operation)}


DEFAULT_FIELD_MANAGER = "kagami"


def paginate(list_endpoint, page_size: int = 500, **params) -> Iterator[Any]:
    """
    Yields every item of a list operation, fetching one page at a time

    Each request asks for at most page_size items; the continue token of each
    page is sent with the next request until a page comes back without one.

    .. code:: python

        apps = AppsV1Api(client)
        for dep in paginate(apps.list_namespaced_deployment, namespace="shop",
                            label_selector="tier=frontend"):
            print(dep.metadata.name)

    :param list_endpoint: a bound list operation, such as
        AppsV1Api(client).list_namespaced_deployment
    :param page_size: int; the 'limit' sent with each request
    :param params: the operation's other parameters
    :return: iterator over the items of all pages; model objects when the list
        class is known, else the raw dicts
    """
    token = None
    while True:
        page = list_endpoint(limit=page_size, continue_=token, **params)
        if isinstance(page, dict):
            items = page.get("items") or []
            token = (page.get("metadata") or {}).get("continue")
        else:
            items = page.items or []
            token = page.metadata.continue_ if page.metadata is not None else None
        yield from items
        if not token:
            break


def server_side_apply(patch_endpoint, body, field_manager: str = DEFAULT_FIELD_MANAGER,
                      force: Optional[bool] = None, **params) -> Any:
    """
    Sends body as a server-side apply through a patch operation

    :param patch_endpoint: a bound patch operation, such as
        AppsV1Api(client).patch_namespaced_deployment
    :param body: the desired state; a model document or a dict, which must
        carry apiVersion and kind
    :param field_manager: str; the manager that owns the applied fields
    :param force: optional bool; True takes ownership of conflicting fields
    :param params: the operation's path parameters (name, namespace)
    :return: the object as stored by the server
    """
    return patch_endpoint(body=body, content_type=APPLY_PATCH_CONTENT_TYPE,
                          field_manager=field_manager, force=force, **params)


class GenericApi(object):
    """
    The standard operations for any resource, given its group, version and plural

    This serves custom resources and any built-in resource that has no
    ApiGroup class. The core group ('' or 'core') is served from /api/<version>,
    every other group from /apis/<group>/<version>.

    The operations built by resource_operations() are available under their
    usual names (list_namespaced_cron_tab and so on); the short forms list,
    read, create, replace, patch, delete, apply and paginate take the
    namespace as a keyword and pick the namespaced or cluster-scoped form.

    .. code:: python

        crontabs = GenericApi(client, "stable.example.com", "v1", "crontabs",
                              CronTab, CronTabList)
        for ct in crontabs.paginate(namespace="default"):
            print(ct.spec.cronSpec)

    :param client: optional Client; one with the default transport is made
        if None
    :param group: str; the API group, '' or 'core' for the core group
    :param version: str; the group version, e.g. 'v1'
    :param plural: str; the resource name in URLs, e.g. 'crontabs'
    :param kind: the model class of one object
    :param list_kind: optional model class of a list of objects
    :param namespaced: bool; False for cluster-scoped resources
    :param subresources: pairs of (subresource name, model class)
    """
    def __init__(self, client: Optional[Client], group: str, version: str,
                 plural: str, kind: type, list_kind: Optional[type] = None,
                 namespaced: bool = True, subresources: Tuple[Tuple[str, type], ...] = ()):
        self.client = client if client is not None else Client()
        self.base_path = (f"/api/{version}" if group in ("", "core")
                          else f"/apis/{group}/{version}")
        self.resource = Resource(plural, kind, list_kind, namespaced, tuple(subresources))
        self._operations = resource_operations(self.base_path, self.resource,
                                               status_class=Status)
        for name, op in self._operations.items():
            op.__set_name__(type(self), name)
        self._x = snake_kind(kind)
        self._ns = "namespaced_" if namespaced else ""

    def __getattr__(self, name):
        ops = self.__dict__.get("_operations", {})
        if name in ops:
            return ops[name].__get__(self, type(self))
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def call(self, operation: Operation, **params) -> Any:
        return self.client.call(operation, **params)

    def operations(self) -> Dict[str, Operation]:
        return dict(self._operations)

    def _endpoint(self, verb: str):
        return getattr(self, f"{verb}_{self._ns}{self._x}")

    def _scope(self, namespace: Optional[str]) -> Dict[str, Any]:
        if self.resource.namespaced:
            return {"namespace": namespace}
        if namespace is not None:
            raise TypeError(f"{self.resource.plural} are cluster-scoped; "
                            f"namespace must not be given")
        return {}

    def list(self, namespace: Optional[str] = None, **query) -> Any:
        """
        Lists objects; for a namespaced resource with no namespace, lists them
        across all namespaces
        """
        if self.resource.namespaced and namespace is None:
            return getattr(self, f"list_{self._x}_for_all_namespaces")(**query)
        return self._endpoint("list")(**self._scope(namespace), **query)

    def read(self, name: str, namespace: Optional[str] = None, **query) -> Any:
        return self._endpoint("read")(name=name, **self._scope(namespace), **query)

    def create(self, body, namespace: Optional[str] = None, **query) -> Any:
        return self._endpoint("create")(body=body, **self._scope(namespace), **query)

    def replace(self, name: str, body, namespace: Optional[str] = None, **query) -> Any:
        return self._endpoint("replace")(name=name, body=body, **self._scope(namespace),
                                         **query)

    def patch(self, name: str, body, namespace: Optional[str] = None,
              content_type: Optional[str] = None, **query) -> Any:
        return self._endpoint("patch")(name=name, body=body, content_type=content_type,
                                       **self._scope(namespace), **query)

    def delete(self, name: str, namespace: Optional[str] = None, **query) -> Any:
        return self._endpoint("delete")(name=name, **self._scope(namespace), **query)

    def apply(self, name: str, body, namespace: Optional[str] = None,
              field_manager: str = DEFAULT_FIELD_MANAGER,
              force: Optional[bool] = None, **query) -> Any:
        """
        Server-side apply of body to the named object; see server_side_apply()
        """
        return server_side_apply(self._endpoint("patch"), body,
                                 field_manager=field_manager, force=force, name=name,
                                 **self._scope(namespace), **query)

    def paginate(self, namespace: Optional[str] = None, page_size: int = 500,
                 **query) -> Iterator[Any]:
        """
        Yields every object, page by page; see paginate()
        """
        return paginate(self.list, page_size=page_size, namespace=namespace, **query)
