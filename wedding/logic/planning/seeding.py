"""Plan seeding: start a plan from a catalog template or from scratch."""
from wedding.domain.BasicInfo import BasicInfo
from wedding.domain.Budget import Budget
from wedding.domain.Template import get_template
from wedding.domain.WeddingPlan import WeddingPlan


def start_from_scratch() -> WeddingPlan:
    """Return the all-empty default plan."""
    return WeddingPlan()


def apply_template(template_id: str) -> WeddingPlan:
    """Return a new plan seeded with the template's theme, style, budget and guest count.

    Raises NotFound when the template id is not in the catalog.
    """
    template = get_template(template_id)
    basic_info = BasicInfo(
        theme=template.theme,
        style=template.style,
        guest_count=template.guest_count,
        budget=template.estimated_budget,
    )
    return WeddingPlan(basic_info=basic_info, budget=Budget(total_budget=template.estimated_budget))
