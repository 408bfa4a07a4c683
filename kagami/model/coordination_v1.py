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
Lease, the 'coordination.k8s.io/v1' leader-election record.
"""
from dataclasses import dataclass
from typing import List, Optional

from kagami.meta import KagamiBase, KagamiDocumentBase, MicroTime
from kagami.model.meta_v1 import ListMeta, ObjectMeta


@dataclass
class LeaseSpec(KagamiBase):
    r"""
    LeaseSpec is a specification of a Lease.

    Full name: io.k8s.api.coordination.v1.LeaseSpec

    Attributes:
    acquireTime: the time the current lease was acquired.
    holderIdentity: the identity of the holder of a current lease.
    leaseDurationSeconds: the duration that candidates for a lease need to wait
        to force acquire it.
    leaseTransitions: the number of transitions of a lease between holders.
    preferredHolder: signals to a lease holder that the lease has a more
        optimal holder and should be given up.
    renewTime: the time the current holder of a lease has last updated the
        lease.
    strategy: the strategy for picking the leader for coordinated leader
        election.
    """

    acquireTime: Optional[MicroTime] = None
    holderIdentity: Optional[str] = None
    leaseDurationSeconds: Optional[int] = None
    leaseTransitions: Optional[int] = None
    preferredHolder: Optional[str] = None
    renewTime: Optional[MicroTime] = None
    strategy: Optional[str] = None


@dataclass
class Lease(KagamiDocumentBase):
    r"""
    Lease defines a lease concept.

    Full name: io.k8s.api.coordination.v1.Lease
    """

    apiVersion: Optional[str] = "coordination.k8s.io/v1"
    kind: Optional[str] = "Lease"
    metadata: Optional[ObjectMeta] = None
    spec: Optional[LeaseSpec] = None


@dataclass
class LeaseList(KagamiDocumentBase):
    apiVersion: Optional[str] = "coordination.k8s.io/v1"
    items: Optional[List[Lease]] = None
    kind: Optional[str] = "LeaseList"
    metadata: Optional[ListMeta] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
