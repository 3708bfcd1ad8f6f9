"""Plan summary aggregation for dashboards, the API snapshot and the PDF export."""
from datetime import date
from typing import Any, Dict, Optional

from wedding.domain.WeddingPlan import WeddingPlan
from wedding.logic.reporting.completion import completion_checks, completion_percentage
from wedding.utilities.constants import VENDOR_STATUSES


def days_until_wedding(plan: WeddingPlan, today: Optional[date] = None) -> Optional[int]:
    """Days left until the wedding date; negative once it has passed, None when no date is set."""
    if plan.basic_info.wedding_date is None:
        return None
    today = today or date.today()
    return (plan.basic_info.wedding_date - today).days


def compute_plan_summary(plan: WeddingPlan, today: Optional[date] = None) -> Dict[str, Any]:
    """Derive every computed value of the plan. Nothing here is cached on the plan.

    Returns structure:
    {
      'completion': int, 'checks': {facet: bool},
      'daysUntilWedding': int | None,
      'budget': {'total', 'allocated', 'spent', 'remaining', 'unallocated', 'overAllocated'},
      'guests': {'total', 'rsvp': {status: count}, 'expectedHeadcount'},
      'timeline': {'total', 'completed', 'progress', 'overdue'},
      'vendors': {'total', 'byStatus': {status: count}, 'totalCost'}
    }
    """
    today = today or date.today()
    budget = plan.budget
    return {
        'completion': completion_percentage(plan),
        'checks': completion_checks(plan),
        'daysUntilWedding': days_until_wedding(plan, today),
        'budget': {
            'total': budget.total_budget,
            'allocated': budget.total_allocated(),
            'spent': budget.total_spent(),
            'remaining': budget.remaining(),
            'unallocated': budget.unallocated(),
            'overAllocated': budget.is_over_allocated(),
        },
        'guests': {
            'total': len(plan.guests),
            'rsvp': plan.guests.rsvp_breakdown(),
            'expectedHeadcount': plan.guests.expected_headcount(),
        },
        'timeline': {
            'total': len(plan.timeline),
            'completed': plan.timeline.count_completed(),
            'progress': plan.timeline.progress_percentage(),
            'overdue': len(plan.timeline.overdue(today)),
        },
        'vendors': {
            'total': len(plan.vendors),
            'byStatus': {status: plan.vendors.count_by_status(status) for status in VENDOR_STATUSES},
            'totalCost': plan.vendors.total_cost(),
        },
    }
