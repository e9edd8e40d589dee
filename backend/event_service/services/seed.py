# -*- coding: utf-8 -*-
from event_service.models import Event


def create_default_events() -> list[Event]:
    """起動時に投入するサンプルイベント。id はストアが 1 から振る。"""
    return [
        Event(title="an event", description="something really cool"),
        Event(title="another event", description="something even cooler"),
    ]
