"""Turn view models into JSON-compatible dicts (camelCase keys, ISO dates)."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum

from ..calendar.grid import CalendarCell
from ..core.exceptions import DataIssue


def camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p.title() for p in rest)


def to_jsonable(obj):
    if isinstance(obj, CalendarCell):
        out = _dataclass_dict(obj)
        out["key"] = obj.key
        out["eventCount"] = obj.event_count
        out["hiddenEventCount"] = obj.hidden_event_count
        out["displayEvents"] = [to_jsonable(e) for e in obj.display_events]
        return out
    if is_dataclass(obj) and not isinstance(obj, type):
        return _dataclass_dict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, DataIssue):
        return {"type": type(obj).__name__, "message": str(obj)}
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in obj]
    return obj


def _dataclass_dict(obj) -> dict:
    return {camel(f.name): to_jsonable(getattr(obj, f.name)) for f in fields(obj) if f.repr}
