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
PodDisruptionBudget and Eviction from the 'policy/v1' group.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from kagami.meta import KagamiBase, KagamiDocumentBase, Time
from kagami.model.meta_v1 import (Condition, DeleteOptions, IntOrString,
                                  LabelSelector, ListMeta, ObjectMeta)


@dataclass
class Eviction(KagamiDocumentBase):
    r"""
    Eviction evicts a pod from its node subject to certain policies and safety
    constraints. This is a subresource of Pod; a request to cause such an
    eviction is created by POSTing to .../pods/<pod name>/evictions.

    Full name: io.k8s.api.policy.v1.Eviction
    """

    apiVersion: Optional[str] = "policy/v1"
    deleteOptions: Optional[DeleteOptions] = None
    kind: Optional[str] = "Eviction"
    metadata: Optional[ObjectMeta] = None


@dataclass
class PodDisruptionBudgetSpec(KagamiBase):
    r"""
    PodDisruptionBudgetSpec is a description of a PodDisruptionBudget.

    Full name: io.k8s.api.policy.v1.PodDisruptionBudgetSpec

    Attributes:
    maxUnavailable: an eviction is allowed if at most "maxUnavailable" pods
        selected by "selector" are unavailable after the eviction. A number or
        a percentage.
    minAvailable: an eviction is allowed if at least "minAvailable" pods
        selected by "selector" will still be available after the eviction. A
        number or a percentage.
    selector: label query over pods whose evictions are managed by the
        disruption budget.
    unhealthyPodEvictionPolicy: defines the criteria for when unhealthy pods
        should be considered for eviction: 'IfHealthyBudget' or
        'AlwaysAllow'.
    """

    maxUnavailable: Optional[IntOrString] = None
    minAvailable: Optional[IntOrString] = None
    selector: Optional[LabelSelector] = None
    unhealthyPodEvictionPolicy: Optional[str] = None


@dataclass
class PodDisruptionBudgetStatus(KagamiBase):
    r"""
    PodDisruptionBudgetStatus represents information about the status of a
    PodDisruptionBudget. Status may trail the actual state of a system.

    Full name: io.k8s.api.policy.v1.PodDisruptionBudgetStatus

    Attributes:
    conditions: the latest available observations of the budget's state.
    currentHealthy: current number of healthy pods.
    desiredHealthy: minimum desired number of healthy pods.
    disruptedPods: a map from pod name to the time when its eviction was
        processed by the API server.
    disruptionsAllowed: number of pod disruptions that are currently allowed.
    expectedPods: total number of pods counted by this disruption budget.
    observedGeneration: the most recent generation observed when updating this
        status.
    """

    conditions: Optional[List[Condition]] = None
    currentHealthy: Optional[int] = None
    desiredHealthy: Optional[int] = None
    disruptedPods: Optional[Dict[str, Time]] = None
    disruptionsAllowed: Optional[int] = None
    expectedPods: Optional[int] = None
    observedGeneration: Optional[int] = None


@dataclass
class PodDisruptionBudget(KagamiDocumentBase):
    r"""
    PodDisruptionBudget is an object to define the max disruption that can be
    caused to a collection of pods

    Full name: io.k8s.api.policy.v1.PodDisruptionBudget
    """

    apiVersion: Optional[str] = "policy/v1"
    kind: Optional[str] = "PodDisruptionBudget"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[PodDisruptionBudgetSpec] = None
    status: Optional[PodDisruptionBudgetStatus] = None


@dataclass
class PodDisruptionBudgetList(KagamiDocumentBase):
    apiVersion: Optional[str] = "policy/v1"
    items: Optional[List[PodDisruptionBudget]] = None
    kind: Optional[str] = "PodDisruptionBudgetList"
    metadata: Optional[ListMeta] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
