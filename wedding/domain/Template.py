"""Template catalog: named starting configurations for a new wedding plan."""
from typing import Tuple

from wedding.domain.errors import NotFound


class Template:
    def __init__(self, id: str, name: str, description: str, theme: str, style: str,
                 estimated_budget: int, guest_count: int, duration: str):
        self.id = id
        self.name = name
        self.description = description
        self.theme = theme
        self.style = style
        self.estimated_budget = estimated_budget
        self.guest_count = guest_count
        self.duration = duration

    def __repr__(self) -> str:
        return f"Template({self.id!r}, {self.name!r})"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "theme": self.theme,
            "style": self.style,
            "estimatedBudget": self.estimated_budget,
            "guestCount": self.guest_count,
            "duration": self.duration,
        }


TEMPLATE_CATALOG: Tuple[Template, ...] = (
    Template("royal", "Royal Palace Wedding", "Grand multi-day celebration with traditional ceremonies",
             "Royal Traditional", "Traditional", 2500000, 500, "3 days"),
    Template("modern", "Modern Elegant Wedding", "Contemporary city wedding with a clean look",
             "Modern Elegant", "Contemporary", 1200000, 200, "1 day"),
    Template("destination", "Beach Destination Wedding", "Travel wedding for family and close friends",
             "Beach Destination", "Destination", 1800000, 120, "2 days"),
    Template("rustic", "Rustic Vintage Wedding", "Countryside venue, warm tones and vintage details",
             "Rustic Vintage", "Vintage", 800000, 150, "1 day"),
    Template("garden", "Garden Outdoor Wedding", "Open-air ceremony with a weather backup plan",
             "Garden Outdoor", "Outdoor", 900000, 180, "1 day"),
    Template("intimate", "Intimate Gathering", "Small wedding for the closest family",
             "Intimate Gathering", "Minimal", 300000, 50, "1 day"),
)


def list_templates() -> Tuple[Template, ...]:
    return TEMPLATE_CATALOG


def get_template(template_id: str) -> Template:
    for template in TEMPLATE_CATALOG:
        if template.id == template_id:
            return template
    raise NotFound("Template", template_id)
