"""Guest domain entity: contact details, category, RSVP status and plus-one flag."""
from wedding.utilities.validators import GuestInput, GuestRecord, validate_input


class Guest:
    FIELDS = ("name", "email", "phone", "category", "rsvp_status", "plus_one")

    def __init__(self, id: str, name: str = "", email: str = "", phone: str = "",
                 category: str = "Family", rsvp_status: str = "Pending", plus_one: bool = False):
        self.id = id
        self.name = name
        self.email = email
        self.phone = phone
        self.category = category
        self.rsvp_status = rsvp_status
        self.plus_one = plus_one

    @classmethod
    def create(cls, id: str, fields: dict) -> "Guest":
        '''Validates ``fields`` (snake_case or camelCase) and builds a guest with the given id.'''
        data = validate_input(GuestInput, fields)
        return cls(id=id, **data.model_dump())

    def fields(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS}

    def headcount(self) -> int:
        return 2 if self.plus_one else 1

    def __eq__(self, other):
        if not isinstance(other, Guest):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Guest({self.id!r}, {self.name!r}, {self.rsvp_status})"

    @staticmethod
    def from_dict(data):
        '''Creates a Guest from its wire dictionary. Raises InvalidInput on bad values.'''
        record = validate_input(GuestRecord, data)
        return Guest(**record.model_dump())

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "category": self.category,
            "rsvpStatus": self.rsvp_status,
            "plusOne": self.plus_one,
        }
