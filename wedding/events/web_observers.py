"""Web-facing observers for wedding plan events.

This module subscribes to an EventBus (the global one by default) for:
  - plan.saved
  - plan.load_failed
  - plan.replaced
  - budget.over_allocated

and stores a lightweight in-memory ring buffer of recent events that can be
queried by the web layer (GET /api/events) so the page can surface warnings
such as a discarded stored plan without a full page reload.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * Guarded by a simple Lock; the buffer is per-process.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS, PLAN_SAVED, PLAN_LOAD_FAILED, PLAN_REPLACED, BUDGET_OVER_ALLOCATED
)

logger = logging.getLogger(__name__)

WARNING_EVENTS = (PLAN_LOAD_FAILED, BUDGET_OVER_ALLOCATED)
OBSERVED_EVENTS = (PLAN_SAVED, PLAN_LOAD_FAILED, PLAN_REPLACED, BUDGET_OVER_ALLOCATED)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_started_on: List[EventBus] = []


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'level': 'warning' if event_name in WARNING_EVENTS else 'info',
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        if isinstance(payload, dict):
            for k in ('key', 'error', 'source', 'completion', 'allocated', 'total'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus: Optional[EventBus] = None):
    """Idempotent start: subscribe observers once per bus."""
    bus = bus if bus is not None else GLOBAL_EVENT_BUS
    if any(b is bus for b in _started_on):
        return
    for name in OBSERVED_EVENTS:
        bus.subscribe(name, _record)
    _started_on.append(bus)
    logger.debug("Web observers subscribed to plan events")


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


def clear():
    global _next_id
    with _lock:
        _events.clear()
        _next_id = 1


__all__ = ['start', 'get_events', 'clear']
