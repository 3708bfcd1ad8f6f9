"""Event helper utilities.

This module provides helper functions for publishing wedding plan events
on a given bus (the global one by default).

Quick import:
    from wedding.events.event_helpers import (
        publish_plan_changed, publish_plan_replaced, publish_plan_saved,
        publish_load_failed, publish_over_allocated
    )

"""
from __future__ import annotations
from typing import Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    PLAN_CHANGED, PLAN_REPLACED, PLAN_SAVED, PLAN_LOAD_FAILED, BUDGET_OVER_ALLOCATED
)

__all__ = [
    'publish_plan_changed', 'publish_plan_replaced', 'publish_plan_saved',
    'publish_load_failed', 'publish_over_allocated',
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_plan_changed(action: str, completion: int, bus: Optional[EventBus] = None):
    """Publish a plan.changed event after a mutation."""
    _bus(bus).publish(PLAN_CHANGED, {'action': action, 'completion': completion})


def publish_plan_replaced(source: str, completion: int, bus: Optional[EventBus] = None):
    """Publish a plan.replaced event (template, scratch, import or load)."""
    _bus(bus).publish(PLAN_REPLACED, {'source': source, 'completion': completion})


def publish_plan_saved(key: str, bus: Optional[EventBus] = None):
    _bus(bus).publish(PLAN_SAVED, {'key': key})


def publish_load_failed(key: str, error: Exception, bus: Optional[EventBus] = None):
    """Publish a plan.load_failed event; the stored record was discarded."""
    _bus(bus).publish(PLAN_LOAD_FAILED, {'key': key, 'error': str(error)})


def publish_over_allocated(allocated: int, total: int, bus: Optional[EventBus] = None):
    _bus(bus).publish(BUDGET_OVER_ALLOCATED, {'allocated': allocated, 'total': total})
