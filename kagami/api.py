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
API classes for each supported group/version

Each class carries the standard operations (see
kagami.client.resource_operations) for the resources of its group, plus
get_api_resources. Instances need a kagami.client.Client:

.. code:: python

    from kagami.client import Client
    from kagami.api import CoordinationV1Api

    leases = CoordinationV1Api(Client()).list_namespaced_lease(namespace="kube-system")
"""
from kagami.client import ApiGroup, Resource
from kagami.model.apps_v1 import (ControllerRevision, ControllerRevisionList,
                                  DaemonSet, DaemonSetList, Deployment,
                                  DeploymentList, ReplicaSet, ReplicaSetList,
                                  StatefulSet, StatefulSetList)
from kagami.model.apiextensions_v1 import (CustomResourceDefinition,
                                           CustomResourceDefinitionList)
from kagami.model.autoscaling_v1 import (HorizontalPodAutoscaler,
                                         HorizontalPodAutoscalerList, Scale)
from kagami.model.coordination_v1 import Lease, LeaseList
from kagami.model.events_v1 import Event, EventList
from kagami.model.policy_v1 import PodDisruptionBudget, PodDisruptionBudgetList
from kagami.model.resource_v1beta1 import (ResourceClaim, ResourceClaimList,
                                           ResourceClaimTemplate,
                                           ResourceClaimTemplateList)


class AppsV1Api(ApiGroup):
    base_path = "/apis/apps/v1"
    resources = [
        Resource("controllerrevisions", ControllerRevision, ControllerRevisionList),
        Resource("daemonsets", DaemonSet, DaemonSetList,
                 subresources=(("status", DaemonSet),)),
        Resource("deployments", Deployment, DeploymentList,
                 subresources=(("scale", Scale), ("status", Deployment))),
        Resource("replicasets", ReplicaSet, ReplicaSetList,
                 subresources=(("scale", Scale), ("status", ReplicaSet))),
        Resource("statefulsets", StatefulSet, StatefulSetList,
                 subresources=(("scale", Scale), ("status", StatefulSet))),
    ]


class ApiextensionsV1Api(ApiGroup):
    base_path = "/apis/apiextensions.k8s.io/v1"
    resources = [
        Resource("customresourcedefinitions", CustomResourceDefinition,
                 CustomResourceDefinitionList, namespaced=False,
                 subresources=(("status", CustomResourceDefinition),)),
    ]


class AutoscalingV1Api(ApiGroup):
    base_path = "/apis/autoscaling/v1"
    resources = [
        Resource("horizontalpodautoscalers", HorizontalPodAutoscaler,
                 HorizontalPodAutoscalerList,
                 subresources=(("status", HorizontalPodAutoscaler),)),
    ]


class CoordinationV1Api(ApiGroup):
    base_path = "/apis/coordination.k8s.io/v1"
    resources = [Resource("leases", Lease, LeaseList)]


class EventsV1Api(ApiGroup):
    base_path = "/apis/events.k8s.io/v1"
    resources = [Resource("events", Event, EventList)]


class PolicyV1Api(ApiGroup):
    base_path = "/apis/policy/v1"
    resources = [
        Resource("poddisruptionbudgets", PodDisruptionBudget, PodDisruptionBudgetList,
                 subresources=(("status", PodDisruptionBudget),)),
    ]


class ResourceV1beta1Api(ApiGroup):
    base_path = "/apis/resource.k8s.io/v1beta1"
    resources = [
        Resource("resourceclaims", ResourceClaim, ResourceClaimList,
                 subresources=(("status", ResourceClaim),)),
        Resource("resourceclaimtemplates", ResourceClaimTemplate,
                 ResourceClaimTemplateList),
    ]
