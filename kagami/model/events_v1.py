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
Event from the 'events.k8s.io/v1' group.
"""
from dataclasses import dataclass
from typing import List, Optional

from kagami.meta import KagamiBase, KagamiDocumentBase, MicroTime, Time
from kagami.model.meta_v1 import ListMeta, ObjectMeta
from kagami.model.core_v1 import EventSource, ObjectReference


@dataclass
class EventSeries(KagamiBase):
    r"""
    EventSeries contain information on series of events, i.e. thing that was/is
    happening continuously for some time.

    Full name: io.k8s.api.events.v1.EventSeries

    Attributes:
    count: the number of occurrences in this series up to the last heartbeat
        time.
    lastObservedTime: the time when last Event from the series was seen before
        last heartbeat.
    """

    count: Optional[int] = None
    lastObservedTime: Optional[MicroTime] = None


@dataclass
class Event(KagamiDocumentBase):
    r"""
    Event is a report of an event somewhere in the cluster.

    Full name: io.k8s.api.events.v1.Event

    Attributes:
    action: what action was taken/failed regarding to the regarding object.
    apiVersion: 'events.k8s.io/v1'
    deprecatedCount: the deprecated field assuring backward compatibility with
        core.v1 Event type.
    deprecatedFirstTimestamp: the deprecated field assuring backward
        compatibility with core.v1 Event type.
    deprecatedLastTimestamp: the deprecated field assuring backward
        compatibility with core.v1 Event type.
    deprecatedSource: the deprecated field assuring backward compatibility with
        core.v1 Event type.
    eventTime: the time when this Event was first observed.
    kind: 'Event'
    metadata: standard object's metadata.
    note: a human-readable description of the status of this operation.
    reason: why the action was taken.
    regarding: the object this Event is about.
    related: the optional secondary object for more complex actions.
    reportingController: the name of the controller that emitted this Event.
    reportingInstance: the ID of the controller instance.
    series: data about the Event series this event represents.
    type: the type of this event (Normal, Warning).
    """

    action: Optional[str] = None
    apiVersion: Optional[str] = "events.k8s.io/v1"
    deprecatedCount: Optional[int] = None
    deprecatedFirstTimestamp: Optional[Time] = None
    deprecatedLastTimestamp: Optional[Time] = None
    deprecatedSource: Optional[EventSource] = None
    eventTime: Optional[MicroTime] = None
    kind: Optional[str] = "Event"
    metadata: Optional[ObjectMeta] = None
    note: Optional[str] = None
    reason: Optional[str] = None
    regarding: Optional[ObjectReference] = None
    related: Optional[ObjectReference] = None
    reportingController: Optional[str] = None
    reportingInstance: Optional[str] = None
    series: Optional[EventSeries] = None
    type: Optional[str] = None


@dataclass
class EventList(KagamiDocumentBase):
    apiVersion: Optional[str] = "events.k8s.io/v1"
    items: Optional[List[Event]] = None
    kind: Optional[str] = "EventList"
    metadata: Optional[ListMeta] = None


globs = dict(globals())
__all__ = [c.__name__ for c in globs.values()
           if type(c) == type]
del globs
