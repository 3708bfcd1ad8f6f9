"""Completion score: share of the eight top-level plan facets that are filled in."""
from typing import Dict

from wedding.domain.WeddingPlan import WeddingPlan


def completion_checks(plan: WeddingPlan) -> Dict[str, bool]:
    info = plan.basic_info
    return {
        "brideName": bool(info.bride_name),
        "groomName": bool(info.groom_name),
        "weddingDate": info.wedding_date is not None,
        "venue": bool(info.venue),
        # basic_info.budget mirrors this value; see WeddingPlan.set_total_budget
        "budget": plan.budget.total_budget > 0,
        "guests": len(plan.guests) > 0,
        "timeline": len(plan.timeline) > 0,
        "vendors": len(plan.vendors) > 0,
    }


def completion_percentage(plan: WeddingPlan) -> int:
    """Return the completion score in [0, 100], each facet weighing 1/8, rounded half up."""
    checks = completion_checks(plan)
    done = sum(1 for ok in checks.values() if ok)
    total = len(checks)
    return (done * 100 * 2 + total) // (total * 2)
