"""WeddingPlan aggregate: basic info, budget, guests, timeline and vendors for one session."""
import copy
from typing import Optional

from wedding.domain.BasicInfo import BasicInfo
from wedding.domain.Budget import Budget
from wedding.domain.Registry import GuestRegistry, TimelineTracker, VendorRegistry
from wedding.domain.errors import DeserializationError, PlanError


class WeddingPlan:
    def __init__(self, basic_info: Optional[BasicInfo] = None, budget: Optional[Budget] = None,
                 guests: Optional[GuestRegistry] = None, timeline: Optional[TimelineTracker] = None,
                 vendors: Optional[VendorRegistry] = None):
        self.basic_info = basic_info if basic_info is not None else BasicInfo()
        self.budget = budget if budget is not None else Budget()
        self.guests = guests if guests is not None else GuestRegistry()
        self.timeline = timeline if timeline is not None else TimelineTracker()
        self.vendors = vendors if vendors is not None else VendorRegistry()

    def set_total_budget(self, amount) -> int:
        '''
        Sets the canonical total and mirrors it into basic_info.budget so the
        two budget fields never diverge.
        '''
        total = self.budget.set_total_budget(amount)
        self.basic_info.budget = total
        return total

    def update_basic_info(self, **changes) -> BasicInfo:
        '''
        Applies ``changes`` to the basic info. A budget change is mirrored into
        budget.total_budget.
        '''
        updated = self.basic_info.updated(changes)
        self.basic_info = updated
        self.budget.total_budget = updated.budget
        return updated

    def copy(self) -> "WeddingPlan":
        return copy.deepcopy(self)

    def __eq__(self, other):
        if not isinstance(other, WeddingPlan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"WeddingPlan({self.basic_info!r}, {self.budget!r}, guests={len(self.guests)}, "
                f"tasks={len(self.timeline)}, vendors={len(self.vendors)})")

    @staticmethod
    def from_dict(data):
        '''
        Rebuilds a plan from its wire dictionary. Any structural or value
        problem is reported as DeserializationError.
        '''
        if not isinstance(data, dict):
            raise DeserializationError("Wedding plan must be a JSON object")
        try:
            basic_info = BasicInfo.from_dict(data.get("basicInfo", {}))
            budget = Budget.from_dict(data.get("budget", {}))
            guests = GuestRegistry.from_list(data.get("guests", []))
            timeline = TimelineTracker.from_list(data.get("timeline", []))
            vendors = VendorRegistry.from_list(data.get("vendors", []))
        except PlanError as e:
            raise DeserializationError(f"Invalid wedding plan: {e}") from e
        # Older records may carry diverged budget fields; the allocator total wins when set.
        if budget.total_budget:
            basic_info.budget = budget.total_budget
        else:
            budget.total_budget = basic_info.budget
        return WeddingPlan(basic_info, budget, guests, timeline, vendors)

    def to_dict(self):
        return {
            "basicInfo": self.basic_info.to_dict(),
            "budget": self.budget.to_dict(),
            "guests": self.guests.to_list(),
            "timeline": self.timeline.to_list(),
            "vendors": self.vendors.to_list(),
        }
