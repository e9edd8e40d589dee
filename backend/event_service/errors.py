# -*- coding: utf-8 -*-
from typing import Any


class EventServiceError(Exception):
    """ストア操作の失敗。"""


class EventNotFoundError(EventServiceError):
    def __init__(self, event_id: Any):
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")
