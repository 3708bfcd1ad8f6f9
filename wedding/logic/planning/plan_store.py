"""Session plan store: owns the current WeddingPlan and the unsaved-changes flag.

Every mutation validates its input before touching the plan, so a failed call
leaves both the plan and the dirty flag as they were. Derived values
(completion, totals) are computed on read and never stored.
"""
import logging
import threading
from datetime import date
from functools import wraps
from typing import Callable, Optional, TypeVar

from wedding.domain.WeddingPlan import WeddingPlan
from wedding.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from wedding.events.event_helpers import publish_over_allocated, publish_plan_changed, publish_plan_replaced
from wedding.infra.Plan_Repository import PlanRepository
from wedding.infra.pdf_utils import generate_pdf_for_plan
from wedding.logic.planning import seeding
from wedding.logic.reporting.completion import completion_percentage
from wedding.logic.reporting.summary import compute_plan_summary

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def _synchronized(method: F) -> F:
    """Run the method while holding the store's lock."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.lock:
            return method(self, *args, **kwargs)
    return wrapper


class WeddingPlanStore:
    def __init__(self, plan: Optional[WeddingPlan] = None, repository: Optional[PlanRepository] = None,
                 event_bus: Optional[EventBus] = None):
        # re-entrant so callers can group several store calls under one `with store.lock`
        self.lock = threading.RLock()
        self._event_bus = event_bus if event_bus is not None else GLOBAL_EVENT_BUS
        self.repository = repository if repository is not None else PlanRepository(event_bus=self._event_bus)
        self._plan = plan if plan is not None else seeding.start_from_scratch()
        self.has_unsaved_changes = False

    # --- Reads --------------------------------------------------------------
    @property
    def plan(self) -> WeddingPlan:
        return self._plan

    @_synchronized
    def snapshot(self) -> WeddingPlan:
        """Independent copy of the current plan for readers."""
        return self._plan.copy()

    @_synchronized
    def completion_percentage(self) -> int:
        return completion_percentage(self._plan)

    @_synchronized
    def summary(self, today: Optional[date] = None) -> dict:
        return compute_plan_summary(self._plan, today)

    # --- Plan selection -------------------------------------------------------
    def _replace(self, plan: WeddingPlan, source: str) -> WeddingPlan:
        self._plan = plan
        self.has_unsaved_changes = True
        logger.info(f"Wedding plan replaced ({source})")
        publish_plan_replaced(source, completion_percentage(plan), bus=self._event_bus)
        return plan

    @_synchronized
    def select_template(self, template_id: str) -> WeddingPlan:
        return self._replace(seeding.apply_template(template_id), f"template:{template_id}")

    @_synchronized
    def start_from_scratch(self) -> WeddingPlan:
        return self._replace(seeding.start_from_scratch(), "scratch")

    @_synchronized
    def replace_plan(self, plan: WeddingPlan, source: str = "import") -> WeddingPlan:
        return self._replace(plan, source)

    # --- Mutations ----------------------------------------------------------
    def _changed(self, action: str):
        self.has_unsaved_changes = True
        publish_plan_changed(action, completion_percentage(self._plan), bus=self._event_bus)

    @_synchronized
    def update_basic_info(self, **changes):
        info = self._plan.update_basic_info(**changes)
        self._changed("basic_info.update")
        return info

    @_synchronized
    def set_total_budget(self, amount) -> int:
        total = self._plan.set_total_budget(amount)
        self._changed("budget.total")
        self._check_allocation()
        return total

    @_synchronized
    def set_category_amount(self, category: str, amount):
        entry = self._plan.budget.set_category_amount(category, amount)
        self._changed("budget.allocate")
        self._check_allocation()
        return entry

    @_synchronized
    def set_category_spent(self, category: str, spent):
        entry = self._plan.budget.set_category_spent(category, spent)
        self._changed("budget.spend")
        return entry

    @_synchronized
    def apply_suggested_allocation(self) -> dict:
        suggestion = self._plan.budget.apply_suggested_allocation()
        self._changed("budget.suggested")
        return suggestion

    def _check_allocation(self):
        budget = self._plan.budget
        if budget.is_over_allocated():
            publish_over_allocated(budget.total_allocated(), budget.total_budget, bus=self._event_bus)

    @_synchronized
    def add_guest(self, **fields) -> str:
        guest_id = self._plan.guests.add(**fields)
        self._changed("guest.add")
        return guest_id

    @_synchronized
    def update_guest(self, guest_id: str, **changes):
        guest = self._plan.guests.update(guest_id, **changes)
        self._changed("guest.update")
        return guest

    @_synchronized
    def remove_guest(self, guest_id: str):
        guest = self._plan.guests.remove(guest_id)
        self._changed("guest.remove")
        return guest

    @_synchronized
    def add_task(self, **fields) -> str:
        task_id = self._plan.timeline.add(**fields)
        self._changed("task.add")
        return task_id

    @_synchronized
    def update_task(self, task_id: str, **changes):
        task = self._plan.timeline.update(task_id, **changes)
        self._changed("task.update")
        return task

    @_synchronized
    def add_checklist_tasks(self) -> list:
        """Append the standard checklist, dated from the wedding date when one is set."""
        ids = self._plan.timeline.add_checklist(self._plan.basic_info.wedding_date)
        self._changed("task.checklist")
        return ids

    @_synchronized
    def remove_task(self, task_id: str):
        task = self._plan.timeline.remove(task_id)
        self._changed("task.remove")
        return task

    @_synchronized
    def toggle_task(self, task_id: str) -> bool:
        completed = self._plan.timeline.toggle_completed(task_id)
        self._changed("task.toggle")
        return completed

    @_synchronized
    def add_vendor(self, **fields) -> str:
        vendor_id = self._plan.vendors.add(**fields)
        self._changed("vendor.add")
        return vendor_id

    @_synchronized
    def update_vendor(self, vendor_id: str, **changes):
        vendor = self._plan.vendors.update(vendor_id, **changes)
        self._changed("vendor.update")
        return vendor

    @_synchronized
    def remove_vendor(self, vendor_id: str):
        vendor = self._plan.vendors.remove(vendor_id)
        self._changed("vendor.remove")
        return vendor

    # --- Persistence ----------------------------------------------------------
    @_synchronized
    def save(self) -> None:
        self.repository.save(self._plan)
        self.has_unsaved_changes = False

    @_synchronized
    def load_saved(self) -> bool:
        '''
        Startup load. Replaces the current plan with the stored one when there
        is one; otherwise the current plan stays and False is returned.
        '''
        plan = self.repository.load()
        if plan is None:
            return False
        self._plan = plan
        self.has_unsaved_changes = False
        publish_plan_replaced("storage", completion_percentage(plan), bus=self._event_bus)
        return True

    @_synchronized
    def export(self) -> bytes:
        return self.repository.export(self._plan)

    @_synchronized
    def export_pdf(self, today: Optional[date] = None) -> bytes:
        return generate_pdf_for_plan(self._plan, today)

    @_synchronized
    def import_plan(self, data) -> WeddingPlan:
        return self.replace_plan(self.repository.import_plan(data), "import")
