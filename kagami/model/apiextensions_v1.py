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
CustomResourceDefinition and the OpenAPI v3 schema types of the
'apiextensions.k8s.io/v1' group.

JSONSchemaProps is recursive: it holds lists and maps of itself as well as the
JSONSchemaPropsOr* unions, whose alternatives include JSONSchemaProps again.
It is also extensible; keys it doesn't declare are kept through a round trip.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from kagami.meta import (KagamiBase, KagamiDocumentBase, KagamiUnion, Time,
                         unknown_fields_slot, wire_field)
from kagami.model.meta_v1 import ListMeta, ObjectMeta


@dataclass
class ExternalDocumentation(KagamiBase):
    description: Optional[str] = None
    url: Optional[str] = None


@dataclass
class ValidationRule(KagamiBase):
    r"""
    ValidationRule describes a validation rule written in the CEL expression
    language.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.ValidationRule

    Attributes:
    fieldPath: the field path of the field that the validation failed at.
    message: the message displayed when validation fails.
    messageExpression: a CEL expression that evaluates to the validation
        failure message.
    optionalOldSelf: treat the rule as a transition rule even if the object is
        first created, or if the old object is missing the value.
    reason: a machine-readable validation failure reason.
    rule: the validation rule, e.g. "self.minReplicas <= self.replicas".
    """

    fieldPath: Optional[str] = None
    message: Optional[str] = None
    messageExpression: Optional[str] = None
    optionalOldSelf: Optional[bool] = None
    reason: Optional[str] = None
    rule: Optional[str] = None


@dataclass
class JSONSchemaProps(KagamiBase):
    r"""
    JSONSchemaProps is a JSON-Schema following Specification Draft 4
    (http://json-schema.org/).

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.JSONSchemaProps

    Attributes:
    dollar_ref: written as '$ref'.
    dollar_schema: written as '$schema'.
    additionalItems: a boolean or a schema for items beyond those in items.
    additionalProperties: a boolean or a schema for undeclared properties.
    default: default value for undefined object fields; any JSON value.
    example: any JSON value.
    items: a schema, or a list of schemas.
    not_: written as 'not'.
    x_kubernetes_embedded_resource: written as
        'x-kubernetes-embedded-resource'; the value is an embedded Kubernetes
        runtime.Object with TypeMeta and ObjectMeta.
    x_kubernetes_int_or_string: written as 'x-kubernetes-int-or-string'; the
        value is either an integer or a string.
    x_kubernetes_list_map_keys: written as 'x-kubernetes-list-map-keys'; the
        keys of a list with x-kubernetes-list-type 'map'.
    x_kubernetes_list_type: written as 'x-kubernetes-list-type': 'atomic',
        'set' or 'map'.
    x_kubernetes_map_type: written as 'x-kubernetes-map-type': 'granular' or
        'atomic'.
    x_kubernetes_preserve_unknown_fields: written as
        'x-kubernetes-preserve-unknown-fields'; stops the API server from
        pruning fields not specified in the schema.
    x_kubernetes_validations: written as 'x-kubernetes-validations'; CEL
        validation rules.
    """

    dollar_ref: Optional[str] = wire_field("$ref")
    dollar_schema: Optional[str] = wire_field("$schema")
    additionalItems: Optional["JSONSchemaPropsOrBool"] = None
    additionalProperties: Optional["JSONSchemaPropsOrBool"] = None
    allOf: Optional[List["JSONSchemaProps"]] = None
    anyOf: Optional[List["JSONSchemaProps"]] = None
    default: Optional[Any] = None
    definitions: Optional[Dict[str, "JSONSchemaProps"]] = None
    dependencies: Optional[Dict[str, "JSONSchemaPropsOrStringArray"]] = None
    description: Optional[str] = None
    enum: Optional[List[Any]] = None
    example: Optional[Any] = None
    exclusiveMaximum: Optional[bool] = None
    exclusiveMinimum: Optional[bool] = None
    externalDocs: Optional[ExternalDocumentation] = None
    format: Optional[str] = None
    id: Optional[str] = None
    items: Optional["JSONSchemaPropsOrArray"] = None
    maxItems: Optional[int] = None
    maxLength: Optional[int] = None
    maxProperties: Optional[int] = None
    maximum: Optional[float] = None
    minItems: Optional[int] = None
    minLength: Optional[int] = None
    minProperties: Optional[int] = None
    minimum: Optional[float] = None
    multipleOf: Optional[float] = None
    not_: Optional["JSONSchemaProps"] = wire_field("not")
    nullable: Optional[bool] = None
    oneOf: Optional[List["JSONSchemaProps"]] = None
    pattern: Optional[str] = None
    patternProperties: Optional[Dict[str, "JSONSchemaProps"]] = None
    properties: Optional[Dict[str, "JSONSchemaProps"]] = None
    required: Optional[List[str]] = None
    title: Optional[str] = None
    type: Optional[str] = None
    uniqueItems: Optional[bool] = None
    x_kubernetes_embedded_resource: Optional[bool] = wire_field(
        "x-kubernetes-embedded-resource")
    x_kubernetes_int_or_string: Optional[bool] = wire_field(
        "x-kubernetes-int-or-string")
    x_kubernetes_list_map_keys: Optional[List[str]] = wire_field(
        "x-kubernetes-list-map-keys")
    x_kubernetes_list_type: Optional[str] = wire_field("x-kubernetes-list-type")
    x_kubernetes_map_type: Optional[str] = wire_field("x-kubernetes-map-type")
    x_kubernetes_preserve_unknown_fields: Optional[bool] = wire_field(
        "x-kubernetes-preserve-unknown-fields")
    x_kubernetes_validations: Optional[List[ValidationRule]] = wire_field(
        "x-kubernetes-validations")
    _unknown_fields: Dict[str, Any] = unknown_fields_slot()


@dataclass
class JSONSchemaPropsOrBool(KagamiUnion):
    r"""
    Either a boolean or a schema. Booleans are tried first.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.JSONSchemaPropsOrBool
    """

    allows: Optional[bool] = None
    schema: Optional[JSONSchemaProps] = None


@dataclass
class JSONSchemaPropsOrArray(KagamiUnion):
    r"""
    Either a single schema or a list of schemas.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.JSONSchemaPropsOrArray
    """

    schema: Optional[JSONSchemaProps] = None
    JSONSchemas: Optional[List[JSONSchemaProps]] = None


@dataclass
class JSONSchemaPropsOrStringArray(KagamiUnion):
    r"""
    Either a schema or a list of property names.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.JSONSchemaPropsOrStringArray
    """

    schema: Optional[JSONSchemaProps] = None
    property: Optional[List[str]] = None


@dataclass
class CustomResourceValidation(KagamiBase):
    openAPIV3Schema: Optional[JSONSchemaProps] = None


@dataclass
class CustomResourceColumnDefinition(KagamiBase):
    r"""
    CustomResourceColumnDefinition specifies a column for server side printing.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.CustomResourceColumnDefinition

    Attributes:
    description: a human readable description of this column.
    format: an optional OpenAPI type definition for this column.
    jsonPath: a simple JSON path (i.e. with array notation) which is evaluated
        against each custom resource to produce the value for this column.
    name: a human readable name for the column.
    priority: an integer defining the relative importance of this column
        compared to others.
    type: an OpenAPI type definition for this column.
    """

    description: Optional[str] = None
    format: Optional[str] = None
    jsonPath: Optional[str] = None
    name: Optional[str] = None
    priority: Optional[int] = None
    type: Optional[str] = None


@dataclass
class ServiceReference(KagamiBase):
    name: Optional[str] = None
    namespace: Optional[str] = None
    path: Optional[str] = None
    port: Optional[int] = None


@dataclass
class WebhookClientConfig(KagamiBase):
    r"""
    WebhookClientConfig contains the information to make a TLS connection with
    the webhook.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.WebhookClientConfig
    """

    caBundle: Optional[str] = None
    service: Optional[ServiceReference] = None
    url: Optional[str] = None


@dataclass
class WebhookConversion(KagamiBase):
    clientConfig: Optional[WebhookClientConfig] = None
    conversionReviewVersions: Optional[List[str]] = None


@dataclass
class CustomResourceConversion(KagamiBase):
    r"""
    CustomResourceConversion describes how to convert different versions of a
    CR.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.CustomResourceConversion

    Attributes:
    strategy: specifies how custom resources are converted between versions:
        'None' or 'Webhook'.
    webhook: describes how to call the conversion webhook. Required when
        strategy is set to 'Webhook'.
    """

    strategy: Optional[str] = None
    webhook: Optional[WebhookConversion] = None


@dataclass
class CustomResourceDefinitionNames(KagamiBase):
    categories: Optional[List[str]] = None
    kind: Optional[str] = None
    listKind: Optional[str] = None
    plural: Optional[str] = None
    shortNames: Optional[List[str]] = None
    singular: Optional[str] = None


@dataclass
class CustomResourceSubresourceScale(KagamiBase):
    labelSelectorPath: Optional[str] = None
    specReplicasPath: Optional[str] = None
    statusReplicasPath: Optional[str] = None


@dataclass
class CustomResourceSubresourceStatus(KagamiBase):
    r"""
    Enables the status subresource for a custom resource; has no fields and is
    written as an empty object.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.CustomResourceSubresourceStatus
    """
    pass


@dataclass
class CustomResourceSubresources(KagamiBase):
    scale: Optional[CustomResourceSubresourceScale] = None
    status: Optional[CustomResourceSubresourceStatus] = None


@dataclass
class SelectableField(KagamiBase):
    jsonPath: Optional[str] = None


@dataclass
class CustomResourceDefinitionVersion(KagamiBase):
    r"""
    CustomResourceDefinitionVersion describes a version for CRD.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.CustomResourceDefinitionVersion

    Attributes:
    additionalPrinterColumns: additional columns returned in Table output.
    deprecated: indicates this version of the custom resource API is
        deprecated.
    deprecationWarning: overrides the default warning returned to API clients.
    name: the version name, e.g. "v1", "v2beta1".
    schema: the schema used for validation, pruning, and defaulting of this
        version of the custom resource.
    selectableFields: the paths to fields that may be used as field selectors.
    served: a flag enabling/disabling this version from being served via REST
        APIs.
    storage: indicates this version should be used when persisting custom
        resources to storage. There must be exactly one version with
        storage=true.
    subresources: specify what subresources this version of the defined custom
        resource have.
    """

    additionalPrinterColumns: Optional[List[CustomResourceColumnDefinition]] = None
    deprecated: Optional[bool] = None
    deprecationWarning: Optional[str] = None
    name: Optional[str] = None
    schema: Optional[CustomResourceValidation] = None
    selectableFields: Optional[List[SelectableField]] = None
    served: Optional[bool] = None
    storage: Optional[bool] = None
    subresources: Optional[CustomResourceSubresources] = None


@dataclass
class CustomResourceDefinitionSpec(KagamiBase):
    r"""
    CustomResourceDefinitionSpec describes how a user wants their resource to
    appear

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.CustomResourceDefinitionSpec

    Attributes:
    conversion: defines conversion settings for the CRD.
    group: the API group of the defined custom resource.
    names: specify the resource and kind names for the custom resource.
    preserveUnknownFields: indicates that object fields which are not
        specified in the OpenAPI schema should be preserved when persisting to
        storage.
    scope: indicates whether the defined custom resource is cluster- or
        namespace-scoped: 'Cluster' or 'Namespaced'.
    versions: the list of all API versions of the defined custom resource.
    """

    conversion: Optional[CustomResourceConversion] = None
    group: Optional[str] = None
    names: Optional[CustomResourceDefinitionNames] = None
    preserveUnknownFields: Optional[bool] = None
    scope: Optional[str] = None
    versions: Optional[List[CustomResourceDefinitionVersion]] = None


@dataclass
class CustomResourceDefinitionCondition(KagamiBase):
    lastTransitionTime: Optional[Time] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


@dataclass
class CustomResourceDefinitionStatus(KagamiBase):
    acceptedNames: Optional[CustomResourceDefinitionNames] = None
    conditions: Optional[List[CustomResourceDefinitionCondition]] = None
    observedGeneration: Optional[int] = None
    storedVersions: Optional[List[str]] = None


@dataclass
class CustomResourceDefinition(KagamiDocumentBase):
    r"""
    CustomResourceDefinition represents a resource that should be exposed on
    the API server. Its name MUST be in the format <.spec.name>.<.spec.group>.

    Full name: io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.CustomResourceDefinition
    """

    apiVersion: Optional[str] = "apiextensions.k8s.io/v1"
    kind: Optional[str] = "CustomResourceDefinition"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[CustomResourceDefinitionSpec] = None
    status: Optional[CustomResourceDefinitionStatus] = None


@dataclass
class CustomResourceDefinitionList(KagamiDocumentBase):
    apiVersion: Optional[str] = "apiextensions.k8s.io/v1"
    items: Optional[List[CustomResourceDefinition]] = None
    kind: Optional[str] = "CustomResourceDefinitionList"
    metadata: Optional[ListMeta] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
