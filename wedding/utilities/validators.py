"""
Input validation schemas using Pydantic for better data integrity.

Keyword arguments use snake_case names; camelCase wire names of the stored
plan are converted before validation so the same schemas validate both.
"""
from datetime import date
from typing import Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_snake

from wedding.domain.errors import InvalidInput

RsvpStatus = Literal["Pending", "Confirmed", "Declined"]
Priority = Literal["Low", "Medium", "High"]
VendorStatus = Literal["Contacted", "Quoted", "Booked", "Confirmed", "Cancelled"]

ModelT = TypeVar("ModelT", bound=BaseModel)


class _PlanInput(BaseModel):
    model_config = ConfigDict(extra='forbid')


class BasicInfoInput(_PlanInput):
    """Schema for the basic wedding details."""
    bride_name: str = ""
    groom_name: str = ""
    wedding_date: Optional[date] = None
    venue: str = ""
    guest_count: int = Field(0, ge=0)
    budget: int = Field(0, ge=0)
    theme: str = ""
    style: str = ""

    @field_validator('bride_name', 'groom_name', 'venue', 'theme', 'style')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class GuestInput(_PlanInput):
    """Schema for a guest entry."""
    name: str = ""
    email: str = ""
    phone: str = ""
    category: str = "Family"
    rsvp_status: RsvpStatus = "Pending"
    plus_one: bool = False

    @field_validator('name', 'email', 'phone', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class TaskInput(_PlanInput):
    """Schema for a timeline task."""
    task: str = ""
    category: str = ""
    due_date: Optional[date] = None
    completed: bool = False
    priority: Priority = "Medium"


class VendorInput(_PlanInput):
    """Schema for a vendor engagement."""
    category: str = ""
    name: str = ""
    contact: str = ""
    cost: int = Field(0, ge=0)
    status: VendorStatus = "Contacted"
    notes: str = ""


class GuestRecord(GuestInput):
    id: str = Field(..., min_length=1)


class TaskRecord(TaskInput):
    id: str = Field(..., min_length=1)


class VendorRecord(VendorInput):
    id: str = Field(..., min_length=1)


class BudgetAmountInput(_PlanInput):
    """Schema for a per-category amount (allocated or spent)."""
    category: str
    amount: int = Field(..., ge=0)


class TotalBudgetInput(_PlanInput):
    total_budget: int = Field(..., ge=0)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "input"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def validate_input(model: Type[ModelT], data: dict) -> ModelT:
    """Validate ``data`` against ``model``; raise InvalidInput instead of ValidationError."""
    if isinstance(data, dict):
        data = {to_snake(k) if isinstance(k, str) else k: v for k, v in data.items()}
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidInput(_describe(e), errors=e.errors()) from e
