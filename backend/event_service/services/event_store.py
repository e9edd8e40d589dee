# -*- coding: utf-8 -*-
"""
インメモリのイベントストア。

スロットは id をキーにした挿入順の dict で持つ。削除は None（トゥームストーン）を
置くだけなのでスロット数は減らず、次の id は常に「スロット数 + 1」になる。
永続化はしないため、プロセスを再起動すると初期データに戻る。
"""
import logging
import re
import threading
from typing import Any, Iterable, Mapping, Optional, Union

from event_service.errors import EventNotFoundError
from event_service.models import Event

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

EventInput = Union[Event, Mapping[str, Any]]


def coerce_id(value: Any) -> Optional[int]:
    """先頭の整数部分を id として読む（"2abc" -> 2）。読めなければ None。"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value else None
    if value is None:
        return None
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else None


def _as_dict(event: EventInput) -> dict[str, Any]:
    if isinstance(event, Event):
        return event.model_dump(exclude_unset=True)
    return dict(event)


class EventStore:
    def __init__(self, events: Optional[Iterable[EventInput]] = None):
        self._lock = threading.Lock()
        self._slots: dict[int, Optional[Event]] = {}
        self._next_id = 1
        if events:
            self.reset(events)

    def reset(self, events: Optional[Iterable[EventInput]] = None) -> None:
        """全スロットを破棄し、与えられたイベントを 1 から採番し直して投入する。"""
        with self._lock:
            self._slots.clear()
            self._next_id = 1
            for ev in events or ():
                self._append(ev)
            logger.debug("event store reset", extra={"slots": len(self._slots)})

    def add_event(self, event: EventInput, return_all: bool = True):
        with self._lock:
            created = self._append(event)
            logger.debug("event added", extra={"event_id": created.id})
            if return_all:
                return self._live()
            return created

    def get_events(self, include_tombstones: bool = False) -> list[Optional[Event]]:
        with self._lock:
            if include_tombstones:
                return list(self._slots.values())
            return self._live()

    def get_event_by_id(self, event_id: Any) -> Optional[Event]:
        with self._lock:
            return self._find(event_id)

    def get_events_by_title(self, title: str) -> list[Event]:
        if not isinstance(title, str):
            return []
        needle = title.lower()
        with self._lock:
            # 文字列でない title は検索対象外
            return [
                ev for ev in self._live()
                if isinstance(ev.title, str) and needle in ev.title.lower()
            ]

    def update_event(self, event_id: Any, patch: EventInput, return_all: bool = True):
        """patch を既存レコードに浅くマージする。id はパスの値で固定。"""
        with self._lock:
            current = self._find(event_id)
            if current is None:
                raise EventNotFoundError(event_id)
            merged = {**current.model_dump(), **_as_dict(patch), "id": current.id}
            updated = Event.model_validate(merged)
            self._slots[current.id] = updated
            logger.debug("event updated", extra={"event_id": current.id})
            if return_all:
                return self._live()
            return updated

    def delete_event(self, event_id: Any, return_all: bool = True):
        with self._lock:
            current = self._find(event_id)
            if current is None:
                raise EventNotFoundError(event_id)
            # スロットは残す（次の id がずれないように）
            self._slots[current.id] = None
            logger.debug("event deleted", extra={"event_id": current.id})
            if return_all:
                return self._live()
            return current

    def get_events_count(self, include_tombstones: bool = True) -> int:
        with self._lock:
            if include_tombstones:
                return len(self._slots)
            return len(self._live())

    def delete_last_entry(self) -> None:
        """末尾スロットを物理的に取り除く。HTTP には公開しない。"""
        with self._lock:
            if not self._slots:
                return
            last_id = next(reversed(self._slots))
            del self._slots[last_id]
            self._next_id = max(self._slots, default=0) + 1
            logger.debug("last slot removed", extra={"event_id": last_id})

    def _append(self, event: EventInput) -> Event:
        data = _as_dict(event)
        data["id"] = self._next_id
        created = Event.model_validate(data)
        self._slots[created.id] = created
        self._next_id += 1
        return created

    def _find(self, event_id: Any) -> Optional[Event]:
        key = coerce_id(event_id)
        if key is None:
            return None
        return self._slots.get(key)

    def _live(self) -> list[Event]:
        return [ev for ev in self._slots.values() if ev is not None]
