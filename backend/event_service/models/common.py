# -*- coding: utf-8 -*-
from typing import List

from pydantic import BaseModel, Field

from event_service.models.event import Event


class EventList(BaseModel):
    events: List[Event] = Field(default_factory=list)


class VersionInfo(BaseModel):
    version: str


class ErrorMessage(BaseModel):
    message: str
