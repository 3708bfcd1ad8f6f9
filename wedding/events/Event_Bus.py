"""Simple Event Bus / Observer implementation for wedding plan notifications.

Event names used so far:
  plan.changed -> payload {"action": str, "completion": int}
  plan.replaced -> payload {"source": str, "completion": int}
  plan.saved -> payload {"key": str}
  plan.load_failed -> payload {"key": str, "error": str}
  budget.over_allocated -> payload {"allocated": int, "total": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PLAN_CHANGED = "plan.changed"
PLAN_REPLACED = "plan.replaced"
PLAN_SAVED = "plan.saved"
PLAN_LOAD_FAILED = "plan.load_failed"
BUDGET_OVER_ALLOCATED = "budget.over_allocated"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		# A failing subscriber must not abort the mutation that published the event.
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"[EventBus] Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'PLAN_CHANGED', 'PLAN_REPLACED', 'PLAN_SAVED', 'PLAN_LOAD_FAILED', 'BUDGET_OVER_ALLOCATED'
]
