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
HTTP transports used by kagami.client.Client

A transport takes a method, a path (already filled in), an optional body in
wire form (a dict or list) and optional query parameters, and returns the
decoded JSON response body. Authentication, TLS, connection pooling and
retries all belong to the transport; kagami itself does none of them.
"""
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"
APPLY_PATCH_CONTENT_TYPE = "application/apply-patch+yaml"


class Transport(object):
    """
    Base class of transports; subclasses implement request()
    """
    def request(self, method: str, path: str, body: Any = None,
                query: Optional[Dict[str, Any]] = None,
                content_type: Optional[str] = None) -> Any:
        """
        Send a request and return the parsed response body

        :param method: str; HTTP method, upper case
        :param path: str; the path portion of the URL with all parameters
            substituted, e.g. /apis/apps/v1/namespaces/default/deployments
        :param body: optional; JSON-ready body (dict or list)
        :param query: optional dict of query parameters, keys as the API
            server spells them (camelCase)
        :param content_type: optional str; content type of the body
        :return: the response body as parsed JSON (usually a dict), or None
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement "
                                  f"request()")  # pragma: no cover

    def get(self, path: str, query: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, query=query)

    def post(self, path: str, body: Any, query: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("POST", path, body=body, query=query,
                            content_type=JSON_CONTENT_TYPE)

    def put(self, path: str, body: Any, query: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("PUT", path, body=body, query=query,
                            content_type=JSON_CONTENT_TYPE)

    def patch(self, path: str, body: Any, query: Optional[Dict[str, Any]] = None,
              content_type: Optional[str] = None) -> Any:
        return self.request("PATCH", path, body=body, query=query,
                            content_type=content_type or MERGE_PATCH_CONTENT_TYPE)

    def delete(self, path: str, body: Any = None,
               query: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("DELETE", path, body=body, query=query,
                            content_type=JSON_CONTENT_TYPE if body is not None else None)


class KubernetesTransport(Transport):
    """
    Transport built on the official Kubernetes Python client's ApiClient

    The ApiClient supplies the cluster address, credentials and connection
    pool from whatever configuration has been loaded (for instance with
    kubernetes.config.load_kube_config()). Failed requests raise
    kubernetes.client.ApiException, which is not caught here.
    """
    def __init__(self, api_client=None):
        if api_client is None:
            from kubernetes.client import ApiClient
            api_client = ApiClient()
        self.api_client = api_client

    def request(self, method: str, path: str, body: Any = None,
                query: Optional[Dict[str, Any]] = None,
                content_type: Optional[str] = None) -> Any:
        header_params = {'Accept': self.api_client.select_header_accept(
            ['application/json'])}
        if content_type is not None:
            header_params['Content-Type'] = content_type
        query_params = list(query.items()) if query else []
        logger.debug("%s %s query=%s", method, path, query_params)
        data, status, _ = self.api_client.call_api(path, method,
                                                   path_params={},
                                                   query_params=query_params,
                                                   header_params=header_params,
                                                   body=body,
                                                   post_params=[],
                                                   files={},
                                                   response_type=object,
                                                   auth_settings=['BearerToken'],
                                                   _return_http_data_only=False,
                                                   collection_formats={})
        logger.debug("%s %s returned %s", method, path, status)
        return data
