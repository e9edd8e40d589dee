# -*- coding: utf-8 -*-
from fastapi import Request

from event_service.services.event_store import EventStore


def get_store(request: Request) -> EventStore:
    """アプリに1つだけあるストアを返す（create_app で app.state に載せる）。"""
    return request.app.state.store
