"""Basic wedding details: couple, date, venue, headline numbers and look."""
from datetime import date
from typing import Optional

from wedding.utilities.validators import BasicInfoInput, validate_input


class BasicInfo:
    FIELDS = ("bride_name", "groom_name", "wedding_date", "venue", "guest_count", "budget", "theme", "style")

    def __init__(self, bride_name: str = "", groom_name: str = "", wedding_date: Optional[date] = None,
                 venue: str = "", guest_count: int = 0, budget: int = 0, theme: str = "", style: str = ""):
        self.bride_name = bride_name
        self.groom_name = groom_name
        self.wedding_date = wedding_date
        self.venue = venue
        self.guest_count = guest_count
        self.budget = budget
        self.theme = theme
        self.style = style

    def fields(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS}

    def updated(self, changes: dict) -> "BasicInfo":
        '''Returns a new BasicInfo with ``changes`` applied. Raises InvalidInput; self is untouched.'''
        merged = self.fields()
        merged.update(changes)
        data = validate_input(BasicInfoInput, merged)
        return BasicInfo(**data.model_dump())

    def __eq__(self, other):
        if not isinstance(other, BasicInfo):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"BasicInfo({self.bride_name!r} & {self.groom_name!r}, {self.wedding_date})"

    @staticmethod
    def from_dict(data):
        return BasicInfo(**validate_input(BasicInfoInput, data).model_dump())

    def to_dict(self):
        return {
            "brideName": self.bride_name,
            "groomName": self.groom_name,
            "weddingDate": self.wedding_date.isoformat() if self.wedding_date else None,
            "venue": self.venue,
            "guestCount": self.guest_count,
            "budget": self.budget,
            "theme": self.theme,
            "style": self.style,
        }
