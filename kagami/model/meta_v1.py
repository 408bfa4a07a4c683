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
Object types from k8s.io/apimachinery that every API group shares: object and
list metadata, label selectors, conditions, Status, delete options, resource
discovery, and the IntOrString and RawExtension value types.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from kagami.meta import (KagamiBase, KagamiDocumentBase, KagamiUnion, Time,
                         unknown_fields_slot, wire_field)


@dataclass
class IntOrString(KagamiUnion):
    r"""
    A value that is written either as an integer or as a string, such as a
    port number or name, or a replica count or percentage.

    Full name: io.k8s.apimachinery.pkg.util.intstr.IntOrString

    Attributes:
    intVal: the integer form, e.g. 3
    strVal: the string form, e.g. '25%' or 'http'
    """

    intVal: Optional[int] = None
    strVal: Optional[str] = None


@dataclass
class RawExtension(KagamiBase):
    r"""
    An embedded object of any kind, kept exactly as received.

    Full name: io.k8s.apimachinery.pkg.runtime.RawExtension
    """

    _unknown_fields: Dict[str, Any] = unknown_fields_slot()


@dataclass
class ManagedFieldsEntry(KagamiBase):
    r"""
    ManagedFieldsEntry is a workflow-id, a FieldSet and the group version of the
    resource that the fieldset applies to.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.ManagedFieldsEntry

    Attributes:
    apiVersion: the version of this resource that this field set applies to.
    fieldsType: the discriminator for the format of fieldsV1; only 'FieldsV1'.
    fieldsV1: the field set, as an opaque JSON object.
    manager: identifier of the workflow managing these fields.
    operation: the type of operation which lead to this entry: 'Apply' or
        'Update'.
    subresource: the name of the subresource used to update the object.
    time: the timestamp of when the entry was added.
    """

    apiVersion: Optional[str] = None
    fieldsType: Optional[str] = None
    fieldsV1: Optional[Any] = None
    manager: Optional[str] = None
    operation: Optional[str] = None
    subresource: Optional[str] = None
    time: Optional[Time] = None


@dataclass
class OwnerReference(KagamiBase):
    r"""
    OwnerReference contains enough information to let you identify an owning
    object. An owning object must be in the same namespace as the dependent, or
    be cluster-scoped, so there is no namespace field.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.OwnerReference

    Attributes:
    apiVersion: API version of the referent.
    blockOwnerDeletion: if true, the owner cannot be deleted from storage before
        this reference is removed.
    controller: if true, this reference points to the managing controller.
    kind: kind of the referent.
    name: name of the referent.
    uid: UID of the referent.
    """

    apiVersion: Optional[str] = None
    blockOwnerDeletion: Optional[bool] = None
    controller: Optional[bool] = None
    kind: Optional[str] = None
    name: Optional[str] = None
    uid: Optional[str] = None


@dataclass
class ObjectMeta(KagamiBase):
    r"""
    ObjectMeta is metadata that all persisted resources must have, which
    includes all objects users must create.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta

    Attributes:
    annotations: unstructured key value map stored with a resource.
    creationTimestamp: server time when this object was created.
    deletionGracePeriodSeconds: seconds allowed for graceful termination.
    deletionTimestamp: RFC 3339 date and time at which this resource will be
        deleted.
    finalizers: must be empty before the object is deleted from the registry.
    generateName: optional prefix used by the server to generate a unique name.
    generation: a sequence number representing a specific generation of the
        desired state.
    labels: map of string keys and values used to organize and categorize
        objects.
    managedFields: maps workflow-id and version to the set of fields managed
        by that workflow.
    name: must be unique within a namespace.
    namespace: the space within which each name must be unique.
    ownerReferences: list of objects depended on by this object.
    resourceVersion: opaque value for the internal version of this object.
    selfLink: deprecated.
    uid: unique in time and space value for this object.
    """

    annotations: Optional[Dict[str, str]] = None
    creationTimestamp: Optional[Time] = None
    deletionGracePeriodSeconds: Optional[int] = None
    deletionTimestamp: Optional[Time] = None
    finalizers: Optional[List[str]] = None
    generateName: Optional[str] = None
    generation: Optional[int] = None
    labels: Optional[Dict[str, str]] = None
    managedFields: Optional[List[ManagedFieldsEntry]] = None
    name: Optional[str] = None
    namespace: Optional[str] = None
    ownerReferences: Optional[List[OwnerReference]] = None
    resourceVersion: Optional[str] = None
    selfLink: Optional[str] = None
    uid: Optional[str] = None


@dataclass
class ListMeta(KagamiBase):
    r"""
    ListMeta describes metadata that synthetic resources must have, including
    lists and various status objects.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.ListMeta

    Attributes:
    continue_: set if the user should set a limit on the number of items
        returned; pass it back to the server to fetch the next page. Written
        as 'continue' on the wire.
    remainingItemCount: the number of subsequent items in the list which are
        not included in this list response.
    resourceVersion: identifies the server's internal version of this object.
    selfLink: deprecated.
    """

    continue_: Optional[str] = wire_field("continue")
    remainingItemCount: Optional[int] = None
    resourceVersion: Optional[str] = None
    selfLink: Optional[str] = None


@dataclass
class LabelSelectorRequirement(KagamiBase):
    r"""
    A label selector requirement is a selector that contains values, a key, and
    an operator that relates the key and values.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.LabelSelectorRequirement
    """

    key: Optional[str] = None
    operator: Optional[str] = None
    values: Optional[List[str]] = None


@dataclass
class LabelSelector(KagamiBase):
    r"""
    A label selector is a label query over a set of resources. The result of
    matchLabels and matchExpressions are ANDed. An empty label selector matches
    all objects. A null label selector matches no objects.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.LabelSelector
    """

    matchExpressions: Optional[List[LabelSelectorRequirement]] = None
    matchLabels: Optional[Dict[str, str]] = None


@dataclass
class Condition(KagamiBase):
    r"""
    Condition contains details for one aspect of the current state of an API
    resource.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.Condition

    Attributes:
    lastTransitionTime: the last time the condition transitioned from one
        status to another.
    message: a human readable message indicating details about the transition.
    observedGeneration: the .metadata.generation that the condition was set
        based upon.
    reason: a programmatic identifier for the condition's last transition.
    status: one of True, False, Unknown.
    type: the type of condition in CamelCase.
    """

    lastTransitionTime: Optional[Time] = None
    message: Optional[str] = None
    observedGeneration: Optional[int] = None
    reason: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


@dataclass
class StatusCause(KagamiBase):
    field: Optional[str] = None
    message: Optional[str] = None
    reason: Optional[str] = None


@dataclass
class StatusDetails(KagamiBase):
    r"""
    StatusDetails is a set of additional properties that MAY be set by the
    server to provide additional information about a response.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.StatusDetails
    """

    causes: Optional[List[StatusCause]] = None
    group: Optional[str] = None
    kind: Optional[str] = None
    name: Optional[str] = None
    retryAfterSeconds: Optional[int] = None
    uid: Optional[str] = None


@dataclass
class Status(KagamiDocumentBase):
    r"""
    Status is a return value for calls that don't return other objects.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.Status

    Attributes:
    apiVersion: 'v1'
    code: suggested HTTP return code for this status, 0 if not set.
    details: extended data associated with the reason.
    kind: 'Status'
    message: a human-readable description of the status of this operation.
    metadata: standard list metadata.
    reason: a machine-readable description of why this operation is in the
        "Failure" status.
    status: one of "Success" or "Failure".
    """

    apiVersion: Optional[str] = "v1"
    code: Optional[int] = None
    details: Optional[StatusDetails] = None
    kind: Optional[str] = "Status"
    message: Optional[str] = None
    metadata: Optional[ListMeta] = None
    reason: Optional[str] = None
    status: Optional[str] = None


@dataclass
class Preconditions(KagamiBase):
    resourceVersion: Optional[str] = None
    uid: Optional[str] = None


@dataclass
class DeleteOptions(KagamiDocumentBase):
    r"""
    DeleteOptions may be provided when deleting an API object.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.DeleteOptions

    Attributes:
    apiVersion: 'v1'
    dryRun: when present, indicates that modifications should not be persisted.
    gracePeriodSeconds: the duration in seconds before the object should be
        deleted.
    ignoreStoreReadErrorWithClusterBreakingPotential: if set to true, it will
        trigger an unsafe deletion of the resource in case the normal deletion
        flow fails with a corrupt object error.
    kind: 'DeleteOptions'
    orphanDependents: deprecated; use propagationPolicy.
    preconditions: must be fulfilled before a deletion is carried out.
    propagationPolicy: whether and how garbage collection will be performed:
        'Orphan', 'Background' or 'Foreground'.
    """

    apiVersion: Optional[str] = "v1"
    dryRun: Optional[List[str]] = None
    gracePeriodSeconds: Optional[int] = None
    ignoreStoreReadErrorWithClusterBreakingPotential: Optional[bool] = None
    kind: Optional[str] = "DeleteOptions"
    orphanDependents: Optional[bool] = None
    preconditions: Optional[Preconditions] = None
    propagationPolicy: Optional[str] = None


@dataclass
class APIResource(KagamiBase):
    r"""
    APIResource specifies the name of a resource and whether it is namespaced.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.APIResource
    """

    categories: Optional[List[str]] = None
    group: Optional[str] = None
    kind: Optional[str] = None
    name: Optional[str] = None
    namespaced: Optional[bool] = None
    shortNames: Optional[List[str]] = None
    singularName: Optional[str] = None
    storageVersionHash: Optional[str] = None
    verbs: Optional[List[str]] = None
    version: Optional[str] = None


@dataclass
class APIResourceList(KagamiDocumentBase):
    r"""
    APIResourceList is a list of APIResource, it is used to expose the name of
    the resources supported in a specific group and version, and if the
    resource is namespaced.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.APIResourceList
    """

    apiVersion: Optional[str] = "v1"
    groupVersion: Optional[str] = None
    kind: Optional[str] = "APIResourceList"
    resources: Optional[List[APIResource]] = None


@dataclass
class WatchEvent(KagamiBase):
    r"""
    Event represents a single event to a watched resource.

    Full name: io.k8s.apimachinery.pkg.apis.meta.v1.WatchEvent

    Attributes:
    object: the object: if type is ADDED or MODIFIED, the new state of the
        object; if DELETED, the state just before deletion; if ERROR, a Status.
    type: one of ADDED, MODIFIED, DELETED, BOOKMARK or ERROR.
    """

    object: Optional[RawExtension] = None
    type: Optional[str] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
