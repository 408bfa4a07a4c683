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
ResourceClaim and ResourceClaimTemplate from the 'resource.k8s.io/v1beta1'
group (dynamic resource allocation).
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from kagami.meta import KagamiBase, KagamiDocumentBase, Quantity, Time
from kagami.model.meta_v1 import Condition, ListMeta, ObjectMeta
from kagami.model.core_v1 import NodeSelector


@dataclass
class CELDeviceSelector(KagamiBase):
    expression: Optional[str] = None


@dataclass
class DeviceSelector(KagamiBase):
    cel: Optional[CELDeviceSelector] = None


@dataclass
class DeviceToleration(KagamiBase):
    r"""
    The ResourceClaim this DeviceToleration is attached to tolerates any taint
    that matches the triple <key,value,effect> using the matching operator
    <operator>.

    Full name: io.k8s.api.resource.v1beta1.DeviceToleration
    """

    effect: Optional[str] = None
    key: Optional[str] = None
    operator: Optional[str] = None
    tolerationSeconds: Optional[int] = None
    value: Optional[str] = None


@dataclass
class CapacityRequirements(KagamiBase):
    requests: Optional[Dict[str, Quantity]] = None


@dataclass
class DeviceSubRequest(KagamiBase):
    r"""
    DeviceSubRequest describes a request for device provided in the
    claim.spec.devices.requests[].firstAvailable array.

    Full name: io.k8s.api.resource.v1beta1.DeviceSubRequest
    """

    allocationMode: Optional[str] = None
    capacity: Optional[CapacityRequirements] = None
    count: Optional[int] = None
    deviceClassName: Optional[str] = None
    name: Optional[str] = None
    selectors: Optional[List[DeviceSelector]] = None
    tolerations: Optional[List[DeviceToleration]] = None


@dataclass
class DeviceRequest(KagamiBase):
    r"""
    DeviceRequest is a request for devices required for a claim. This is
    typically a request for a single resource like a device, but can also ask
    for several identical devices.

    Full name: io.k8s.api.resource.v1beta1.DeviceRequest

    Attributes:
    adminAccess: indicates that this is a claim for administrative access to
        the device(s).
    allocationMode: how devices are allocated: 'ExactCount' or 'All'.
    capacity: the resource capacity each allocated device must provide.
    count: used only when the allocation mode is ExactCount.
    deviceClassName: references a specific DeviceClass.
    firstAvailable: subrequests, of which exactly one will be satisfied.
    name: can be used to reference this request in a pod.spec.containers[]
        .resources.claims entry and in a constraint.
    selectors: selectors that define which devices may satisfy this request.
    tolerations: device taints that this request tolerates.
    """

    adminAccess: Optional[bool] = None
    allocationMode: Optional[str] = None
    capacity: Optional[CapacityRequirements] = None
    count: Optional[int] = None
    deviceClassName: Optional[str] = None
    firstAvailable: Optional[List[DeviceSubRequest]] = None
    name: Optional[str] = None
    selectors: Optional[List[DeviceSelector]] = None
    tolerations: Optional[List[DeviceToleration]] = None


@dataclass
class DeviceConstraint(KagamiBase):
    distinctAttribute: Optional[str] = None
    matchAttribute: Optional[str] = None
    requests: Optional[List[str]] = None


@dataclass
class OpaqueDeviceConfiguration(KagamiBase):
    r"""
    OpaqueDeviceConfiguration contains configuration parameters for a driver in
    a format defined by the driver vendor.

    Full name: io.k8s.api.resource.v1beta1.OpaqueDeviceConfiguration

    Attributes:
    driver: used to determine which kubelet plugin needs to be passed these
        configuration parameters.
    parameters: any JSON data; kept as received.
    """

    driver: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None


@dataclass
class DeviceClaimConfiguration(KagamiBase):
    opaque: Optional[OpaqueDeviceConfiguration] = None
    requests: Optional[List[str]] = None


@dataclass
class DeviceClaim(KagamiBase):
    r"""
    DeviceClaim defines how to request devices with a ResourceClaim.

    Full name: io.k8s.api.resource.v1beta1.DeviceClaim
    """

    config: Optional[List[DeviceClaimConfiguration]] = None
    constraints: Optional[List[DeviceConstraint]] = None
    requests: Optional[List[DeviceRequest]] = None


@dataclass
class ResourceClaimSpec(KagamiBase):
    devices: Optional[DeviceClaim] = None


@dataclass
class DeviceAllocationConfiguration(KagamiBase):
    opaque: Optional[OpaqueDeviceConfiguration] = None
    requests: Optional[List[str]] = None
    source: Optional[str] = None


@dataclass
class DeviceRequestAllocationResult(KagamiBase):
    r"""
    DeviceRequestAllocationResult contains the allocation result for one
    request.

    Full name: io.k8s.api.resource.v1beta1.DeviceRequestAllocationResult
    """

    adminAccess: Optional[bool] = None
    bindingConditions: Optional[List[str]] = None
    bindingFailureConditions: Optional[List[str]] = None
    consumedCapacity: Optional[Dict[str, Quantity]] = None
    device: Optional[str] = None
    driver: Optional[str] = None
    pool: Optional[str] = None
    request: Optional[str] = None
    shareID: Optional[str] = None
    tolerations: Optional[List[DeviceToleration]] = None


@dataclass
class DeviceAllocationResult(KagamiBase):
    config: Optional[List[DeviceAllocationConfiguration]] = None
    results: Optional[List[DeviceRequestAllocationResult]] = None


@dataclass
class AllocationResult(KagamiBase):
    r"""
    AllocationResult contains attributes of an allocated resource.

    Full name: io.k8s.api.resource.v1beta1.AllocationResult
    """

    allocationTimestamp: Optional[Time] = None
    devices: Optional[DeviceAllocationResult] = None
    nodeSelector: Optional[NodeSelector] = None


@dataclass
class NetworkDeviceData(KagamiBase):
    hardwareAddress: Optional[str] = None
    interfaceName: Optional[str] = None
    ips: Optional[List[str]] = None


@dataclass
class AllocatedDeviceStatus(KagamiBase):
    r"""
    AllocatedDeviceStatus contains the status of an allocated device, if the
    driver chooses to report it.

    Full name: io.k8s.api.resource.v1beta1.AllocatedDeviceStatus

    Attributes:
    conditions: the latest observation of the device's state.
    data: arbitrary driver-specific data; kept as received.
    device: references one device instance via its name in the driver's
        resource pool.
    driver: specifies the name of the DRA driver whose kubelet plugin should be
        invoked to process the allocation once the claim is needed on a node.
    networkData: contains network-related information specific to the device.
    pool: the name of the pool the device belongs to.
    shareID: uniquely identifies an individual allocation share of the device.
    """

    conditions: Optional[List[Condition]] = None
    data: Optional[Dict[str, Any]] = None
    device: Optional[str] = None
    driver: Optional[str] = None
    networkData: Optional[NetworkDeviceData] = None
    pool: Optional[str] = None
    shareID: Optional[str] = None


@dataclass
class ResourceClaimConsumerReference(KagamiBase):
    apiGroup: Optional[str] = None
    name: Optional[str] = None
    resource: Optional[str] = None
    uid: Optional[str] = None


@dataclass
class ResourceClaimStatus(KagamiBase):
    r"""
    ResourceClaimStatus tracks whether the resource has been allocated and what
    the result of that was.

    Full name: io.k8s.api.resource.v1beta1.ResourceClaimStatus
    """

    allocation: Optional[AllocationResult] = None
    devices: Optional[List[AllocatedDeviceStatus]] = None
    reservedFor: Optional[List[ResourceClaimConsumerReference]] = None


@dataclass
class ResourceClaim(KagamiDocumentBase):
    r"""
    ResourceClaim describes a request for access to resources in the cluster,
    for use by workloads.

    Full name: io.k8s.api.resource.v1beta1.ResourceClaim
    """

    apiVersion: Optional[str] = "resource.k8s.io/v1beta1"
    kind: Optional[str] = "ResourceClaim"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[ResourceClaimSpec] = None
    status: Optional[ResourceClaimStatus] = None


@dataclass
class ResourceClaimList(KagamiDocumentBase):
    apiVersion: Optional[str] = "resource.k8s.io/v1beta1"
    items: Optional[List[ResourceClaim]] = None
    kind: Optional[str] = "ResourceClaimList"
    metadata: Optional[ListMeta] = None


@dataclass
class ResourceClaimTemplateSpec(KagamiBase):
    metadata: Optional[ObjectMeta] = None
    spec: Optional[ResourceClaimSpec] = None


@dataclass
class ResourceClaimTemplate(KagamiDocumentBase):
    r"""
    ResourceClaimTemplate is used to produce ResourceClaim objects.

    Full name: io.k8s.api.resource.v1beta1.ResourceClaimTemplate
    """

    apiVersion: Optional[str] = "resource.k8s.io/v1beta1"
    kind: Optional[str] = "ResourceClaimTemplate"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[ResourceClaimTemplateSpec] = None


@dataclass
class ResourceClaimTemplateList(KagamiDocumentBase):
    apiVersion: Optional[str] = "resource.k8s.io/v1beta1"
    items: Optional[List[ResourceClaimTemplate]] = None
    kind: Optional[str] = "ResourceClaimTemplateList"
    metadata: Optional[ListMeta] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
