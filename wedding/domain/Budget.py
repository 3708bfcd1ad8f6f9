"""Budget aggregate: total budget plus the fixed set of spending categories."""
import logging
from typing import Dict, List

from wedding.domain.errors import CategoryNotFound, InvalidInput
from wedding.utilities.constants import BUDGET_CATEGORIES, SUGGESTED_BUDGET_SHARES
from wedding.utilities.validators import BudgetAmountInput, TotalBudgetInput, validate_input

logger = logging.getLogger(__name__)


class BudgetCategory:
    def __init__(self, category: str, amount: int = 0, spent: int = 0):
        self.category = category
        self.amount = amount
        self.spent = spent

    def remaining(self) -> int:
        return self.amount - self.spent

    def __eq__(self, other):
        if not isinstance(other, BudgetCategory):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{self.category}: {self.spent}/{self.amount}"

    def to_dict(self):
        return {"category": self.category, "amount": self.amount, "spent": self.spent}


class Budget:
    """Total budget and per-category allocations.

    ``allocated`` always holds exactly the categories of BUDGET_CATEGORIES, in
    that order. Allocations may exceed the total; that is reported through
    ``is_over_allocated`` and never rejected.
    """

    def __init__(self, total_budget: int = 0, allocated: List[BudgetCategory] = None):
        self.total_budget = total_budget
        by_name = {c.category: c for c in (allocated or [])}
        self.allocated: List[BudgetCategory] = [
            by_name.get(name) or BudgetCategory(name) for name in BUDGET_CATEGORIES
        ]

    # --- Lookups ----------------------------------------------------------
    def category(self, name: str) -> BudgetCategory:
        for entry in self.allocated:
            if entry.category == name:
                return entry
        raise CategoryNotFound(name)

    def categories(self) -> List[str]:
        return [c.category for c in self.allocated]

    # --- Mutations --------------------------------------------------------
    def set_total_budget(self, amount) -> int:
        '''
        Replaces the total budget. Raises InvalidInput for negative or non-numeric values.
        '''
        self.total_budget = validate_input(TotalBudgetInput, {"total_budget": amount}).total_budget
        return self.total_budget

    def set_category_amount(self, category: str, amount) -> BudgetCategory:
        '''
        Replaces the allocated amount of one fixed category.
        '''
        entry = self.category(category)
        entry.amount = validate_input(BudgetAmountInput, {"category": category, "amount": amount}).amount
        if self.is_over_allocated():
            logger.warning(f"Budget over-allocated: {self.total_allocated()} allocated of {self.total_budget}")
        return entry

    def set_category_spent(self, category: str, spent) -> BudgetCategory:
        entry = self.category(category)
        entry.spent = validate_input(BudgetAmountInput, {"category": category, "amount": spent}).amount
        return entry

    def suggested_allocation(self) -> Dict[str, int]:
        """Split the total across categories by their typical share (rounded down)."""
        return {
            name: self.total_budget * SUGGESTED_BUDGET_SHARES.get(name, 0) // 100
            for name in BUDGET_CATEGORIES
        }

    def apply_suggested_allocation(self) -> Dict[str, int]:
        suggestion = self.suggested_allocation()
        for entry in self.allocated:
            entry.amount = suggestion[entry.category]
        return suggestion

    # --- Aggregates -------------------------------------------------------
    def total_allocated(self) -> int:
        return sum(c.amount for c in self.allocated)

    def total_spent(self) -> int:
        return sum(c.spent for c in self.allocated)

    def remaining(self) -> int:
        return self.total_budget - self.total_spent()

    def unallocated(self) -> int:
        return self.total_budget - self.total_allocated()

    def is_over_allocated(self) -> bool:
        return self.total_allocated() > self.total_budget

    def __eq__(self, other):
        if not isinstance(other, Budget):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Budget(total={self.total_budget}, allocated={self.total_allocated()}, spent={self.total_spent()})"

    @staticmethod
    def from_dict(data):
        '''
        Builds a Budget from its wire dictionary. Missing categories start at zero;
        an unknown or repeated category raises InvalidInput.
        '''
        if not isinstance(data, dict):
            raise InvalidInput("budget must be an object")
        total = validate_input(TotalBudgetInput, {"total_budget": data.get("totalBudget", 0)}).total_budget
        raw_allocated = data.get("allocated", [])
        if not isinstance(raw_allocated, list):
            raise InvalidInput("budget.allocated must be a list")
        entries = []
        seen = set()
        for raw in raw_allocated:
            if not isinstance(raw, dict):
                raise InvalidInput("budget.allocated entries must be objects")
            name = raw.get("category")
            if name not in BUDGET_CATEGORIES:
                raise CategoryNotFound(str(name))
            if name in seen:
                raise InvalidInput(f"Budget category '{name}' listed twice")
            seen.add(name)
            amount = validate_input(BudgetAmountInput, {"category": name, "amount": raw.get("amount", 0)}).amount
            spent = validate_input(BudgetAmountInput, {"category": name, "amount": raw.get("spent", 0)}).amount
            entries.append(BudgetCategory(name, amount, spent))
        return Budget(total, entries)

    def to_dict(self):
        return {
            "totalBudget": self.total_budget,
            "allocated": [c.to_dict() for c in self.allocated],
        }
