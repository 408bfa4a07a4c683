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
Scale, the subresource that the workload controllers expose for changing their
replica count, and the HorizontalPodAutoscaler that drives it, from the
'autoscaling/v1' group.
"""
from dataclasses import dataclass
from typing import List, Optional

from kagami.meta import KagamiBase, KagamiDocumentBase, Time
from kagami.model.meta_v1 import ListMeta, ObjectMeta


@dataclass
class ScaleSpec(KagamiBase):
    replicas: Optional[int] = None


@dataclass
class ScaleStatus(KagamiBase):
    r"""
    ScaleStatus represents the current status of a scale subresource.

    Full name: io.k8s.api.autoscaling.v1.ScaleStatus

    Attributes:
    replicas: the actual number of observed instances of the scaled object.
    selector: the label query over pods that should match the replicas count,
        in the serialized form of a label selector.
    """

    replicas: Optional[int] = None
    selector: Optional[str] = None


@dataclass
class Scale(KagamiDocumentBase):
    r"""
    Scale represents a scaling request for a resource.

    Full name: io.k8s.api.autoscaling.v1.Scale
    """

    apiVersion: Optional[str] = "autoscaling/v1"
    kind: Optional[str] = "Scale"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[ScaleSpec] = None
    status: Optional[ScaleStatus] = None


@dataclass
class CrossVersionObjectReference(KagamiBase):
    apiVersion: Optional[str] = None
    kind: Optional[str] = None
    name: Optional[str] = None


@dataclass
class HorizontalPodAutoscalerSpec(KagamiBase):
    r"""
    specification of a horizontal pod autoscaler.

    Full name: io.k8s.api.autoscaling.v1.HorizontalPodAutoscalerSpec

    Attributes:
    maxReplicas: the upper limit for the number of pods that can be set by the
        autoscaler.
    minReplicas: the lower limit for the number of pods that can be set by the
        autoscaler, default 1.
    scaleTargetRef: reference to scaled resource.
    targetCPUUtilizationPercentage: the target average CPU utilization over all
        the pods.
    """

    maxReplicas: Optional[int] = None
    minReplicas: Optional[int] = None
    scaleTargetRef: Optional[CrossVersionObjectReference] = None
    targetCPUUtilizationPercentage: Optional[int] = None


@dataclass
class HorizontalPodAutoscalerStatus(KagamiBase):
    currentCPUUtilizationPercentage: Optional[int] = None
    currentReplicas: Optional[int] = None
    desiredReplicas: Optional[int] = None
    lastScaleTime: Optional[Time] = None
    observedGeneration: Optional[int] = None


@dataclass
class HorizontalPodAutoscaler(KagamiDocumentBase):
    r"""
    configuration of a horizontal pod autoscaler.

    Full name: io.k8s.api.autoscaling.v1.HorizontalPodAutoscaler
    """

    apiVersion: Optional[str] = "autoscaling/v1"
    kind: Optional[str] = "HorizontalPodAutoscaler"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[HorizontalPodAutoscalerSpec] = None
    status: Optional[HorizontalPodAutoscalerStatus] = None


@dataclass
class HorizontalPodAutoscalerList(KagamiDocumentBase):
    apiVersion: Optional[str] = "autoscaling/v1"
    items: Optional[List[HorizontalPodAutoscaler]] = None
    kind: Optional[str] = "HorizontalPodAutoscalerList"
    metadata: Optional[ListMeta] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
