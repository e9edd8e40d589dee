# -*- coding: utf-8 -*-
from typing import Any

from fastapi import APIRouter, Body, Depends

from event_service.dependencies import get_store
from event_service.models import EventList
from event_service.services.event_store import EventStore

router = APIRouter()


@router.get("/events", response_model=EventList)
def list_events(store: EventStore = Depends(get_store)):
    return EventList(events=store.get_events())


# 本来はデータストアへの insert。今はメモリ上の一覧に追加するだけなので、
# 複数レプリカで動かすと各プロセスの内容がずれる。
@router.post("/event", response_model=EventList, status_code=201)
def create_event(
    event: dict[str, Any] = Body(...),
    store: EventStore = Depends(get_store),
):
    return EventList(events=store.add_event(event))


@router.put("/event/{event_id}", response_model=EventList)
def update_event(
    event_id: str,
    patch: dict[str, Any] = Body(...),
    store: EventStore = Depends(get_store),
):
    return EventList(events=store.update_event(event_id, patch))
