# -*- coding: utf-8 -*-
from event_service.models.event import Event
from event_service.models.common import EventList, VersionInfo, ErrorMessage

__all__ = [
    "Event",
    "EventList",
    "VersionInfo",
    "ErrorMessage",
]
