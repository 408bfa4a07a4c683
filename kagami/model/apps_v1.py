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
Workload controllers of the 'apps/v1' group: Deployment, StatefulSet, DaemonSet,
ReplicaSet and ControllerRevision.
"""
from dataclasses import dataclass
from typing import List, Optional

from kagami.meta import KagamiBase, KagamiDocumentBase, Time
from kagami.model.meta_v1 import (IntOrString, LabelSelector, ListMeta,
                                  ObjectMeta, RawExtension)
from kagami.model.core_v1 import PersistentVolumeClaim, PodTemplateSpec


@dataclass
class ControllerRevision(KagamiDocumentBase):
    r"""
    ControllerRevision implements an immutable snapshot of state data. Clients
    are responsible for serializing and deserializing the objects that contain
    their internal state.

    Full name: io.k8s.api.apps.v1.ControllerRevision

    Attributes:
    apiVersion: 'apps/v1'
    data: the serialized representation of the state.
    kind: 'ControllerRevision'
    metadata: standard object's metadata.
    revision: indicates the revision of the state represented by data.
    """

    apiVersion: Optional[str] = "apps/v1"
    data: Optional[RawExtension] = None
    kind: Optional[str] = "ControllerRevision"
    metadata: Optional[ObjectMeta] = None
    revision: Optional[int] = None


@dataclass
class ControllerRevisionList(KagamiDocumentBase):
    apiVersion: Optional[str] = "apps/v1"
    items: Optional[List[ControllerRevision]] = None
    kind: Optional[str] = "ControllerRevisionList"
    metadata: Optional[ListMeta] = None


@dataclass
class RollingUpdateDaemonSet(KagamiBase):
    r"""
    Spec to control the desired behavior of daemon set rolling update.

    Full name: io.k8s.api.apps.v1.RollingUpdateDaemonSet

    Attributes:
    maxSurge: the maximum number of nodes with an existing available DaemonSet
        pod that can have an updated DaemonSet pod during an update. Value can
        be an absolute number (ex: 5) or a percentage of desired pods
        (ex: 10%).
    maxUnavailable: the maximum number of DaemonSet pods that can be
        unavailable during the update, as a number or a percentage.
    """

    maxSurge: Optional[IntOrString] = None
    maxUnavailable: Optional[IntOrString] = None


@dataclass
class DaemonSetUpdateStrategy(KagamiBase):
    rollingUpdate: Optional[RollingUpdateDaemonSet] = None
    type: Optional[str] = None


@dataclass
class DaemonSetCondition(KagamiBase):
    r"""
    DaemonSetCondition describes the state of a DaemonSet at a certain point.

    Full name: io.k8s.api.apps.v1.DaemonSetCondition
    """

    lastTransitionTime: Optional[Time] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


@dataclass
class DaemonSetSpec(KagamiBase):
    r"""
    DaemonSetSpec is the specification of a daemon set.

    Full name: io.k8s.api.apps.v1.DaemonSetSpec

    Attributes:
    minReadySeconds: the minimum number of seconds for which a newly created
        DaemonSet pod should be ready without any of its container crashing,
        for it to be considered available.
    revisionHistoryLimit: the number of old history to retain to allow
        rollback.
    selector: a label query over pods that are managed by the daemon set.
    template: an object that describes the pod that will be created.
    updateStrategy: an update strategy to replace existing DaemonSet pods with
        new pods.
    """

    minReadySeconds: Optional[int] = None
    revisionHistoryLimit: Optional[int] = None
    selector: Optional[LabelSelector] = None
    template: Optional[PodTemplateSpec] = None
    updateStrategy: Optional[DaemonSetUpdateStrategy] = None


@dataclass
class DaemonSetStatus(KagamiBase):
    r"""
    DaemonSetStatus represents the current status of a daemon set.

    Full name: io.k8s.api.apps.v1.DaemonSetStatus
    """

    collisionCount: Optional[int] = None
    conditions: Optional[List[DaemonSetCondition]] = None
    currentNumberScheduled: Optional[int] = None
    desiredNumberScheduled: Optional[int] = None
    numberAvailable: Optional[int] = None
    numberMisscheduled: Optional[int] = None
    numberReady: Optional[int] = None
    numberUnavailable: Optional[int] = None
    observedGeneration: Optional[int] = None
    updatedNumberScheduled: Optional[int] = None


@dataclass
class DaemonSet(KagamiDocumentBase):
    r"""
    DaemonSet represents the configuration of a daemon set.

    Full name: io.k8s.api.apps.v1.DaemonSet
    """

    apiVersion: Optional[str] = "apps/v1"
    kind: Optional[str] = "DaemonSet"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[DaemonSetSpec] = None
    status: Optional[DaemonSetStatus] = None


@dataclass
class DaemonSetList(KagamiDocumentBase):
    apiVersion: Optional[str] = "apps/v1"
    items: Optional[List[DaemonSet]] = None
    kind: Optional[str] = "DaemonSetList"
    metadata: Optional[ListMeta] = None


@dataclass
class RollingUpdateDeployment(KagamiBase):
    r"""
    Spec to control the desired behavior of rolling update.

    Full name: io.k8s.api.apps.v1.RollingUpdateDeployment

    Attributes:
    maxSurge: the maximum number of pods that can be scheduled above the
        desired number of pods, as a number (ex: 5) or a percentage (ex: 10%).
    maxUnavailable: the maximum number of pods that can be unavailable during
        the update, as a number or a percentage.
    """

    maxSurge: Optional[IntOrString] = None
    maxUnavailable: Optional[IntOrString] = None


@dataclass
class DeploymentStrategy(KagamiBase):
    r"""
    DeploymentStrategy describes how to replace existing pods with new ones.

    Full name: io.k8s.api.apps.v1.DeploymentStrategy

    Attributes:
    rollingUpdate: rolling update config params. Present only if type is
        RollingUpdate.
    type: type of deployment. Can be "Recreate" or "RollingUpdate".
    """

    rollingUpdate: Optional[RollingUpdateDeployment] = None
    type: Optional[str] = None


@dataclass
class DeploymentCondition(KagamiBase):
    lastTransitionTime: Optional[Time] = None
    lastUpdateTime: Optional[Time] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


@dataclass
class DeploymentSpec(KagamiBase):
    r"""
    DeploymentSpec is the specification of the desired behavior of the
    Deployment.

    Full name: io.k8s.api.apps.v1.DeploymentSpec

    Attributes:
    minReadySeconds: minimum number of seconds for which a newly created pod
        should be ready without any of its container crashing, for it to be
        considered available.
    paused: indicates that the deployment is paused.
    progressDeadlineSeconds: the maximum time in seconds for a deployment to
        make progress before it is considered to be failed.
    replicas: number of desired pods.
    revisionHistoryLimit: the number of old ReplicaSets to retain to allow
        rollback.
    selector: label selector for pods.
    strategy: the deployment strategy to use to replace existing pods with new
        ones.
    template: template describes the pods that will be created.
    """

    minReadySeconds: Optional[int] = None
    paused: Optional[bool] = None
    progressDeadlineSeconds: Optional[int] = None
    replicas: Optional[int] = None
    revisionHistoryLimit: Optional[int] = None
    selector: Optional[LabelSelector] = None
    strategy: Optional[DeploymentStrategy] = None
    template: Optional[PodTemplateSpec] = None


@dataclass
class DeploymentStatus(KagamiBase):
    r"""
    DeploymentStatus is the most recently observed status of the Deployment.

    Full name: io.k8s.api.apps.v1.DeploymentStatus
    """

    availableReplicas: Optional[int] = None
    collisionCount: Optional[int] = None
    conditions: Optional[List[DeploymentCondition]] = None
    observedGeneration: Optional[int] = None
    readyReplicas: Optional[int] = None
    replicas: Optional[int] = None
    terminatingReplicas: Optional[int] = None
    unavailableReplicas: Optional[int] = None
    updatedReplicas: Optional[int] = None


@dataclass
class Deployment(KagamiDocumentBase):
    r"""
    Deployment enables declarative updates for Pods and ReplicaSets.

    Full name: io.k8s.api.apps.v1.Deployment

    Attributes:
    apiVersion: 'apps/v1'
    kind: 'Deployment'
    metadata: standard object's metadata.
    spec: specification of the desired behavior of the Deployment.
    status: most recently observed status of the Deployment.
    """

    apiVersion: Optional[str] = "apps/v1"
    kind: Optional[str] = "Deployment"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[DeploymentSpec] = None
    status: Optional[DeploymentStatus] = None


@dataclass
class DeploymentList(KagamiDocumentBase):
    apiVersion: Optional[str] = "apps/v1"
    items: Optional[List[Deployment]] = None
    kind: Optional[str] = "DeploymentList"
    metadata: Optional[ListMeta] = None


@dataclass
class ReplicaSetCondition(KagamiBase):
    lastTransitionTime: Optional[Time] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


@dataclass
class ReplicaSetSpec(KagamiBase):
    r"""
    ReplicaSetSpec is the specification of a ReplicaSet.

    Full name: io.k8s.api.apps.v1.ReplicaSetSpec
    """

    minReadySeconds: Optional[int] = None
    replicas: Optional[int] = None
    selector: Optional[LabelSelector] = None
    template: Optional[PodTemplateSpec] = None


@dataclass
class ReplicaSetStatus(KagamiBase):
    availableReplicas: Optional[int] = None
    conditions: Optional[List[ReplicaSetCondition]] = None
    fullyLabeledReplicas: Optional[int] = None
    observedGeneration: Optional[int] = None
    readyReplicas: Optional[int] = None
    replicas: Optional[int] = None
    terminatingReplicas: Optional[int] = None


@dataclass
class ReplicaSet(KagamiDocumentBase):
    r"""
    ReplicaSet ensures that a specified number of pod replicas are running at
    any given time.

    Full name: io.k8s.api.apps.v1.ReplicaSet
    """

    apiVersion: Optional[str] = "apps/v1"
    kind: Optional[str] = "ReplicaSet"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[ReplicaSetSpec] = None
    status: Optional[ReplicaSetStatus] = None


@dataclass
class ReplicaSetList(KagamiDocumentBase):
    apiVersion: Optional[str] = "apps/v1"
    items: Optional[List[ReplicaSet]] = None
    kind: Optional[str] = "ReplicaSetList"
    metadata: Optional[ListMeta] = None


@dataclass
class RollingUpdateStatefulSetStrategy(KagamiBase):
    r"""
    RollingUpdateStatefulSetStrategy is used to communicate parameter for
    RollingUpdateStatefulSetStrategyType.

    Full name: io.k8s.api.apps.v1.RollingUpdateStatefulSetStrategy

    Attributes:
    maxUnavailable: the maximum number of pods that can be unavailable during
        the update, as a number or a percentage.
    partition: the ordinal at which the StatefulSet should be partitioned for
        updates.
    """

    maxUnavailable: Optional[IntOrString] = None
    partition: Optional[int] = None


@dataclass
class StatefulSetUpdateStrategy(KagamiBase):
    rollingUpdate: Optional[RollingUpdateStatefulSetStrategy] = None
    type: Optional[str] = None


@dataclass
class StatefulSetOrdinals(KagamiBase):
    start: Optional[int] = None


@dataclass
class StatefulSetPersistentVolumeClaimRetentionPolicy(KagamiBase):
    r"""
    Describes the policy used for PVCs created from the StatefulSet
    VolumeClaimTemplates.

    Full name: io.k8s.api.apps.v1.StatefulSetPersistentVolumeClaimRetentionPolicy

    Attributes:
    whenDeleted: what happens to PVCs created from the volume claim templates
        when the StatefulSet is deleted: 'Retain' or 'Delete'.
    whenScaled: what happens to PVCs created from the volume claim templates
        when the StatefulSet is scaled down: 'Retain' or 'Delete'.
    """

    whenDeleted: Optional[str] = None
    whenScaled: Optional[str] = None


@dataclass
class StatefulSetCondition(KagamiBase):
    lastTransitionTime: Optional[Time] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


@dataclass
class StatefulSetSpec(KagamiBase):
    r"""
    A StatefulSetSpec is the specification of a StatefulSet.

    Full name: io.k8s.api.apps.v1.StatefulSetSpec

    Attributes:
    minReadySeconds: minimum number of seconds for which a newly created pod
        should be ready without any of its container crashing for it to be
        considered available.
    ordinals: controls the numbering of replica indices in a StatefulSet.
    persistentVolumeClaimRetentionPolicy: describes the lifecycle of persistent
        volume claims created from volumeClaimTemplates.
    podManagementPolicy: controls how pods are created during initial scale
        up, when replacing pods on nodes, or when scaling down.
    replicas: the desired number of replicas of the given Template.
    revisionHistoryLimit: the maximum number of revisions that will be
        maintained in the StatefulSet's revision history.
    selector: a label query over pods that should match the replica count.
    serviceName: the name of the service that governs this StatefulSet.
    template: the object that describes the pod that will be created if
        insufficient replicas are detected.
    updateStrategy: the StatefulSetUpdateStrategy that will be employed to
        update Pods in the StatefulSet when a revision is made to Template.
    volumeClaimTemplates: a list of claims that pods are allowed to reference.
    """

    minReadySeconds: Optional[int] = None
    ordinals: Optional[StatefulSetOrdinals] = None
    persistentVolumeClaimRetentionPolicy: Optional[
        StatefulSetPersistentVolumeClaimRetentionPolicy] = None
    podManagementPolicy: Optional[str] = None
    replicas: Optional[int] = None
    revisionHistoryLimit: Optional[int] = None
    selector: Optional[LabelSelector] = None
    serviceName: Optional[str] = None
    template: Optional[PodTemplateSpec] = None
    updateStrategy: Optional[StatefulSetUpdateStrategy] = None
    volumeClaimTemplates: Optional[List[PersistentVolumeClaim]] = None


@dataclass
class StatefulSetStatus(KagamiBase):
    r"""
    StatefulSetStatus represents the current state of a StatefulSet.

    Full name: io.k8s.api.apps.v1.StatefulSetStatus
    """

    availableReplicas: Optional[int] = None
    collisionCount: Optional[int] = None
    conditions: Optional[List[StatefulSetCondition]] = None
    currentReplicas: Optional[int] = None
    currentRevision: Optional[str] = None
    observedGeneration: Optional[int] = None
    readyReplicas: Optional[int] = None
    replicas: Optional[int] = None
    updateRevision: Optional[str] = None
    updatedReplicas: Optional[int] = None


@dataclass
class StatefulSet(KagamiDocumentBase):
    r"""
    StatefulSet represents a set of pods with consistent identities.

    Full name: io.k8s.api.apps.v1.StatefulSet
    """

    apiVersion: Optional[str] = "apps/v1"
    kind: Optional[str] = "StatefulSet"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[StatefulSetSpec] = None
    status: Optional[StatefulSetStatus] = None


@dataclass
class StatefulSetList(KagamiDocumentBase):
    apiVersion: Optional[str] = "apps/v1"
    items: Optional[List[StatefulSet]] = None
    kind: Optional[str] = "StatefulSetList"
    metadata: Optional[ListMeta] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
