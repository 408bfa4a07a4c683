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
Core 'v1' object types: the pod template and everything it contains, plus the
handful of core documents that the other groups refer to or that are commonly
sent alongside them (PersistentVolumeClaim, ConfigMap, Namespace, Service, Pod).
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from kagami.meta import KagamiBase, KagamiDocumentBase, Time, Quantity
from kagami.model.meta_v1 import (IntOrString, LabelSelector, ListMeta,
                                  ObjectMeta)


@dataclass
class ObjectReference(KagamiBase):
    r"""
    ObjectReference contains enough information to let you inspect or modify
    the referred object.

    Full name: io.k8s.api.core.v1.ObjectReference

    Attributes:
    apiVersion: API version of the referent.
    fieldPath: if referring to a piece of an object instead of an entire
        object, this string should contain a valid JSON/Go field access
        statement, such as desiredState.manifest.containers[2].
    kind: kind of the referent.
    name: name of the referent.
    namespace: namespace of the referent.
    resourceVersion: specific resourceVersion to which this reference is made,
        if any.
    uid: UID of the referent.
    """

    apiVersion: Optional[str] = None
    fieldPath: Optional[str] = None
    kind: Optional[str] = None
    name: Optional[str] = None
    namespace: Optional[str] = None
    resourceVersion: Optional[str] = None
    uid: Optional[str] = None


@dataclass
class LocalObjectReference(KagamiBase):
    name: Optional[str] = None


@dataclass
class EventSource(KagamiBase):
    r"""
    EventSource contains information for an event.

    Full name: io.k8s.api.core.v1.EventSource
    """

    component: Optional[str] = None
    host: Optional[str] = None


@dataclass
class ConfigMapKeySelector(KagamiBase):
    key: Optional[str] = None
    name: Optional[str] = None
    optional: Optional[bool] = None


@dataclass
class SecretKeySelector(KagamiBase):
    key: Optional[str] = None
    name: Optional[str] = None
    optional: Optional[bool] = None


@dataclass
class ObjectFieldSelector(KagamiBase):
    apiVersion: Optional[str] = None
    fieldPath: Optional[str] = None


@dataclass
class ResourceFieldSelector(KagamiBase):
    r"""
    ResourceFieldSelector represents container resources (cpu, memory) and
    their output format

    Full name: io.k8s.api.core.v1.ResourceFieldSelector
    """

    containerName: Optional[str] = None
    divisor: Optional[Quantity] = None
    resource: Optional[str] = None


@dataclass
class EnvVarSource(KagamiBase):
    configMapKeyRef: Optional[ConfigMapKeySelector] = None
    fieldRef: Optional[ObjectFieldSelector] = None
    resourceFieldRef: Optional[ResourceFieldSelector] = None
    secretKeyRef: Optional[SecretKeySelector] = None


@dataclass
class EnvVar(KagamiBase):
    r"""
    EnvVar represents an environment variable present in a Container.

    Full name: io.k8s.api.core.v1.EnvVar

    Attributes:
    name: name of the environment variable.
    value: variable references $(VAR_NAME) are expanded using the previously
        defined environment variables in the container.
    valueFrom: source for the environment variable's value. Cannot be used if
        value is not empty.
    """

    name: Optional[str] = None
    value: Optional[str] = None
    valueFrom: Optional[EnvVarSource] = None


@dataclass
class ContainerPort(KagamiBase):
    r"""
    ContainerPort represents a network port in a single container.

    Full name: io.k8s.api.core.v1.ContainerPort
    """

    containerPort: Optional[int] = None
    hostIP: Optional[str] = None
    hostPort: Optional[int] = None
    name: Optional[str] = None
    protocol: Optional[str] = None


@dataclass
class ResourceRequirements(KagamiBase):
    r"""
    ResourceRequirements describes the compute resource requirements.

    Full name: io.k8s.api.core.v1.ResourceRequirements

    Attributes:
    limits: the maximum amount of compute resources allowed.
    requests: the minimum amount of compute resources required.
    """

    limits: Optional[Dict[str, Quantity]] = None
    requests: Optional[Dict[str, Quantity]] = None


@dataclass
class VolumeResourceRequirements(KagamiBase):
    limits: Optional[Dict[str, Quantity]] = None
    requests: Optional[Dict[str, Quantity]] = None


@dataclass
class VolumeMount(KagamiBase):
    r"""
    VolumeMount describes a mounting of a Volume within a container.

    Full name: io.k8s.api.core.v1.VolumeMount
    """

    mountPath: Optional[str] = None
    mountPropagation: Optional[str] = None
    name: Optional[str] = None
    readOnly: Optional[bool] = None
    recursiveReadOnly: Optional[str] = None
    subPath: Optional[str] = None
    subPathExpr: Optional[str] = None


@dataclass
class ExecAction(KagamiBase):
    command: Optional[List[str]] = None


@dataclass
class HTTPHeader(KagamiBase):
    name: Optional[str] = None
    value: Optional[str] = None


@dataclass
class HTTPGetAction(KagamiBase):
    r"""
    HTTPGetAction describes an action based on HTTP Get requests.

    Full name: io.k8s.api.core.v1.HTTPGetAction

    Attributes:
    host: host name to connect to, defaults to the pod IP.
    httpHeaders: custom headers to set in the request.
    path: path to access on the HTTP server.
    port: number or name of the port to access on the container.
    scheme: scheme to use for connecting to the host. Defaults to HTTP.
    """

    host: Optional[str] = None
    httpHeaders: Optional[List[HTTPHeader]] = None
    path: Optional[str] = None
    port: Optional[IntOrString] = None
    scheme: Optional[str] = None


@dataclass
class TCPSocketAction(KagamiBase):
    host: Optional[str] = None
    port: Optional[IntOrString] = None


@dataclass
class Probe(KagamiBase):
    r"""
    Probe describes a health check to be performed against a container to
    determine whether it is alive or ready to receive traffic.

    Full name: io.k8s.api.core.v1.Probe
    """

    exec: Optional[ExecAction] = None
    failureThreshold: Optional[int] = None
    httpGet: Optional[HTTPGetAction] = None
    initialDelaySeconds: Optional[int] = None
    periodSeconds: Optional[int] = None
    successThreshold: Optional[int] = None
    tcpSocket: Optional[TCPSocketAction] = None
    terminationGracePeriodSeconds: Optional[int] = None
    timeoutSeconds: Optional[int] = None


@dataclass
class Container(KagamiBase):
    r"""
    A single application container that you want to run within a pod.

    Full name: io.k8s.api.core.v1.Container

    Attributes:
    args: arguments to the entrypoint.
    command: entrypoint array. Not executed within a shell.
    env: list of environment variables to set in the container.
    image: container image name.
    imagePullPolicy: one of Always, Never, IfNotPresent.
    livenessProbe: periodic probe of container liveness.
    name: name of the container specified as a DNS_LABEL.
    ports: list of ports to expose from the container.
    readinessProbe: periodic probe of container service readiness.
    resources: compute resources required by this container.
    startupProbe: indicates that the Pod has successfully initialized.
    stdin: whether this container should allocate a buffer for stdin.
    terminationMessagePath: path at which the file to which the container's
        termination message will be written is mounted.
    terminationMessagePolicy: indicate how the termination message should be
        populated.
    tty: whether this container should allocate a TTY for itself.
    volumeMounts: pod volumes to mount into the container's filesystem.
    workingDir: container's working directory.
    """

    args: Optional[List[str]] = None
    command: Optional[List[str]] = None
    env: Optional[List[EnvVar]] = None
    image: Optional[str] = None
    imagePullPolicy: Optional[str] = None
    livenessProbe: Optional[Probe] = None
    name: Optional[str] = None
    ports: Optional[List[ContainerPort]] = None
    readinessProbe: Optional[Probe] = None
    resources: Optional[ResourceRequirements] = None
    startupProbe: Optional[Probe] = None
    stdin: Optional[bool] = None
    terminationMessagePath: Optional[str] = None
    terminationMessagePolicy: Optional[str] = None
    tty: Optional[bool] = None
    volumeMounts: Optional[List[VolumeMount]] = None
    workingDir: Optional[str] = None


@dataclass
class KeyToPath(KagamiBase):
    key: Optional[str] = None
    mode: Optional[int] = None
    path: Optional[str] = None


@dataclass
class ConfigMapVolumeSource(KagamiBase):
    defaultMode: Optional[int] = None
    items: Optional[List[KeyToPath]] = None
    name: Optional[str] = None
    optional: Optional[bool] = None


@dataclass
class SecretVolumeSource(KagamiBase):
    defaultMode: Optional[int] = None
    items: Optional[List[KeyToPath]] = None
    optional: Optional[bool] = None
    secretName: Optional[str] = None


@dataclass
class EmptyDirVolumeSource(KagamiBase):
    medium: Optional[str] = None
    sizeLimit: Optional[Quantity] = None


@dataclass
class HostPathVolumeSource(KagamiBase):
    path: Optional[str] = None
    type: Optional[str] = None


@dataclass
class PersistentVolumeClaimVolumeSource(KagamiBase):
    claimName: Optional[str] = None
    readOnly: Optional[bool] = None


@dataclass
class Volume(KagamiBase):
    r"""
    Volume represents a named volume in a pod that may be accessed by any
    container in the pod.

    Full name: io.k8s.api.core.v1.Volume
    """

    configMap: Optional[ConfigMapVolumeSource] = None
    emptyDir: Optional[EmptyDirVolumeSource] = None
    hostPath: Optional[HostPathVolumeSource] = None
    name: Optional[str] = None
    persistentVolumeClaim: Optional[PersistentVolumeClaimVolumeSource] = None
    secret: Optional[SecretVolumeSource] = None


@dataclass
class Toleration(KagamiBase):
    r"""
    The pod this Toleration is attached to tolerates any taint that matches the
    triple <key,value,effect> using the matching operator <operator>.

    Full name: io.k8s.api.core.v1.Toleration
    """

    effect: Optional[str] = None
    key: Optional[str] = None
    operator: Optional[str] = None
    tolerationSeconds: Optional[int] = None
    value: Optional[str] = None


@dataclass
class NodeSelectorRequirement(KagamiBase):
    key: Optional[str] = None
    operator: Optional[str] = None
    values: Optional[List[str]] = None


@dataclass
class NodeSelectorTerm(KagamiBase):
    r"""
    A null or empty node selector term matches no objects. The requirements of
    them are ANDed.

    Full name: io.k8s.api.core.v1.NodeSelectorTerm
    """

    matchExpressions: Optional[List[NodeSelectorRequirement]] = None
    matchFields: Optional[List[NodeSelectorRequirement]] = None


@dataclass
class NodeSelector(KagamiBase):
    r"""
    A node selector represents the union of the results of one or more label
    queries over a set of nodes; that is, it represents the OR of the selectors
    represented by the node selector terms.

    Full name: io.k8s.api.core.v1.NodeSelector
    """

    nodeSelectorTerms: Optional[List[NodeSelectorTerm]] = None


@dataclass
class PodSpec(KagamiBase):
    r"""
    PodSpec is a description of a pod.

    Full name: io.k8s.api.core.v1.PodSpec

    Attributes:
    activeDeadlineSeconds: duration in seconds the pod may be active on the
        node relative to StartTime.
    automountServiceAccountToken: whether a service account token should be
        automatically mounted.
    containers: list of containers belonging to the pod.
    dnsPolicy: DNS policy for the pod.
    hostNetwork: host networking requested for this pod.
    hostname: specifies the hostname of the Pod.
    imagePullSecrets: references to secrets in the same namespace to use for
        pulling any of the images used by this PodSpec.
    initContainers: list of initialization containers belonging to the pod.
    nodeName: a request to schedule this pod onto a specific node.
    nodeSelector: a selector which must be true for the pod to fit on a node.
    priorityClassName: indicates the pod's priority.
    restartPolicy: restart policy for all containers within the pod.
    schedulerName: if specified, the pod will be dispatched by specified
        scheduler.
    serviceAccountName: name of the ServiceAccount to use to run this pod.
    subdomain: if specified, the fully qualified Pod hostname will be
        "<hostname>.<subdomain>.<pod namespace>.svc.<cluster domain>".
    terminationGracePeriodSeconds: duration in seconds the pod needs to
        terminate gracefully.
    tolerations: if specified, the pod's tolerations.
    volumes: list of volumes that can be mounted by containers belonging to
        the pod.
    """

    activeDeadlineSeconds: Optional[int] = None
    automountServiceAccountToken: Optional[bool] = None
    containers: Optional[List[Container]] = None
    dnsPolicy: Optional[str] = None
    hostNetwork: Optional[bool] = None
    hostname: Optional[str] = None
    imagePullSecrets: Optional[List[LocalObjectReference]] = None
    initContainers: Optional[List[Container]] = None
    nodeName: Optional[str] = None
    nodeSelector: Optional[Dict[str, str]] = None
    priorityClassName: Optional[str] = None
    restartPolicy: Optional[str] = None
    schedulerName: Optional[str] = None
    serviceAccountName: Optional[str] = None
    subdomain: Optional[str] = None
    terminationGracePeriodSeconds: Optional[int] = None
    tolerations: Optional[List[Toleration]] = None
    volumes: Optional[List[Volume]] = None


@dataclass
class PodTemplateSpec(KagamiBase):
    r"""
    PodTemplateSpec describes the data a pod should have when created from a
    template

    Full name: io.k8s.api.core.v1.PodTemplateSpec
    """

    metadata: Optional[ObjectMeta] = None
    spec: Optional[PodSpec] = None


@dataclass
class PodStatus(KagamiBase):
    hostIP: Optional[str] = None
    message: Optional[str] = None
    phase: Optional[str] = None
    podIP: Optional[str] = None
    qosClass: Optional[str] = None
    reason: Optional[str] = None
    startTime: Optional[Time] = None


@dataclass
class Pod(KagamiDocumentBase):
    r"""
    Pod is a collection of containers that can run on a host.

    Full name: io.k8s.api.core.v1.Pod
    """

    apiVersion: Optional[str] = "v1"
    kind: Optional[str] = "Pod"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[PodSpec] = None
    status: Optional[PodStatus] = None


@dataclass
class PersistentVolumeClaimSpec(KagamiBase):
    r"""
    PersistentVolumeClaimSpec describes the common attributes of storage
    devices and allows a Source for provider-specific attributes

    Full name: io.k8s.api.core.v1.PersistentVolumeClaimSpec
    """

    accessModes: Optional[List[str]] = None
    resources: Optional[VolumeResourceRequirements] = None
    selector: Optional[LabelSelector] = None
    storageClassName: Optional[str] = None
    volumeMode: Optional[str] = None
    volumeName: Optional[str] = None


@dataclass
class PersistentVolumeClaimCondition(KagamiBase):
    lastProbeTime: Optional[Time] = None
    lastTransitionTime: Optional[Time] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


@dataclass
class PersistentVolumeClaimStatus(KagamiBase):
    accessModes: Optional[List[str]] = None
    capacity: Optional[Dict[str, Quantity]] = None
    conditions: Optional[List[PersistentVolumeClaimCondition]] = None
    phase: Optional[str] = None


@dataclass
class PersistentVolumeClaim(KagamiDocumentBase):
    r"""
    PersistentVolumeClaim is a user's request for and claim to a persistent
    volume

    Full name: io.k8s.api.core.v1.PersistentVolumeClaim
    """

    apiVersion: Optional[str] = "v1"
    kind: Optional[str] = "PersistentVolumeClaim"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[PersistentVolumeClaimSpec] = None
    status: Optional[PersistentVolumeClaimStatus] = None


@dataclass
class ConfigMap(KagamiDocumentBase):
    r"""
    ConfigMap holds configuration data for pods to consume.

    Full name: io.k8s.api.core.v1.ConfigMap

    Attributes:
    apiVersion: 'v1'
    binaryData: contains the binary data, as base64 strings.
    data: contains the configuration data.
    immutable: if set to true, ensures that data stored in the ConfigMap
        cannot be updated.
    kind: 'ConfigMap'
    metadata: standard object's metadata.
    """

    apiVersion: Optional[str] = "v1"
    binaryData: Optional[Dict[str, str]] = None
    data: Optional[Dict[str, str]] = None
    immutable: Optional[bool] = None
    kind: Optional[str] = "ConfigMap"
    metadata: Optional[ObjectMeta] = None


@dataclass
class ConfigMapList(KagamiDocumentBase):
    apiVersion: Optional[str] = "v1"
    items: Optional[List[ConfigMap]] = None
    kind: Optional[str] = "ConfigMapList"
    metadata: Optional[ListMeta] = None


@dataclass
class NamespaceSpec(KagamiBase):
    finalizers: Optional[List[str]] = None


@dataclass
class NamespaceStatus(KagamiBase):
    phase: Optional[str] = None


@dataclass
class Namespace(KagamiDocumentBase):
    r"""
    Namespace provides a scope for Names.

    Full name: io.k8s.api.core.v1.Namespace
    """

    apiVersion: Optional[str] = "v1"
    kind: Optional[str] = "Namespace"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[NamespaceSpec] = None
    status: Optional[NamespaceStatus] = None


@dataclass
class ServicePort(KagamiBase):
    r"""
    ServicePort contains information on service's port.

    Full name: io.k8s.api.core.v1.ServicePort

    Attributes:
    appProtocol: the application protocol for this port.
    name: the name of this port within the service.
    nodePort: the port on each node on which this service is exposed when type
        is NodePort or LoadBalancer.
    port: the port that will be exposed by this service.
    protocol: the IP protocol for this port: "TCP", "UDP" or "SCTP".
    targetPort: number or name of the port to access on the pods targeted by
        the service.
    """

    appProtocol: Optional[str] = None
    name: Optional[str] = None
    nodePort: Optional[int] = None
    port: Optional[int] = None
    protocol: Optional[str] = None
    targetPort: Optional[IntOrString] = None


@dataclass
class ServiceSpec(KagamiBase):
    clusterIP: Optional[str] = None
    clusterIPs: Optional[List[str]] = None
    externalName: Optional[str] = None
    ports: Optional[List[ServicePort]] = None
    selector: Optional[Dict[str, str]] = None
    sessionAffinity: Optional[str] = None
    type: Optional[str] = None


@dataclass
class Service(KagamiDocumentBase):
    r"""
    Service is a named abstraction of software service (for example, mysql)
    consisting of local port (for example 3306) that the proxy listens on, and
    the selector that determines which pods will answer requests sent through
    the proxy.

    Full name: io.k8s.api.core.v1.Service
    """

    apiVersion: Optional[str] = "v1"
    kind: Optional[str] = "Service"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[ServiceSpec] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
