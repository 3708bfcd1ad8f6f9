"""Vendor engagement entity: who was contacted for which category, at what cost."""
from wedding.utilities.validators import VendorInput, VendorRecord, validate_input


class Vendor:
    FIELDS = ("category", "name", "contact", "cost", "status", "notes")

    def __init__(self, id: str, category: str = "", name: str = "", contact: str = "",
                 cost: int = 0, status: str = "Contacted", notes: str = ""):
        self.id = id
        self.category = category
        self.name = name
        self.contact = contact
        self.cost = cost
        self.status = status
        self.notes = notes

    @classmethod
    def create(cls, id: str, fields: dict) -> "Vendor":
        data = validate_input(VendorInput, fields)
        return cls(id=id, **data.model_dump())

    def fields(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS}

    def __eq__(self, other):
        if not isinstance(other, Vendor):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Vendor({self.id!r}, {self.name!r}, {self.status})"

    @staticmethod
    def from_dict(data):
        record = validate_input(VendorRecord, data)
        return Vendor(**record.model_dump())

    def to_dict(self):
        return {
            "id": self.id,
            "category": self.category,
            "name": self.name,
            "contact": self.contact,
            "cost": self.cost,
            "status": self.status,
            "notes": self.notes,
        }
