"""CRUD collections held by the wedding plan: guests, timeline tasks and vendors."""
from datetime import date, timedelta
from typing import Callable, Dict, Iterator, List, Optional
from uuid import uuid4

from wedding.domain.Guest import Guest
from wedding.domain.Task import Task
from wedding.domain.Vendor import Vendor
from wedding.domain.errors import InvalidInput, NotFound
from wedding.utilities.constants import PLANNING_CHECKLIST, RSVP_CONFIRMED, RSVP_STATUSES, VENDOR_STATUSES


def _new_id() -> str:
    return uuid4().hex


class Registry:
    """Ordered list of entities keyed by a registry-generated id.

    Subclasses set ``entity`` (the entity class) and ``kind`` (used in errors).
    """
    entity = None
    kind = "Item"

    def __init__(self, items: Optional[List] = None, id_factory: Callable[[], str] = _new_id):
        self._items = []
        self._id_factory = id_factory
        for item in items or []:
            if self._index(item.id) is not None:
                raise InvalidInput(f"Duplicate {self.kind.lower()} id '{item.id}'")
            self._items.append(item)

    def _index(self, item_id: str) -> Optional[int]:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        return None

    def _generate_id(self) -> str:
        new_id = self._id_factory()
        while self._index(new_id) is not None:
            new_id = self._id_factory()
        return new_id

    def add(self, **fields) -> str:
        '''
        Validates ``fields``, appends a new entry and returns its generated id.
        '''
        item = self.entity.create(self._generate_id(), fields)
        self._items.append(item)
        return item.id

    def get(self, item_id: str):
        index = self._index(item_id)
        if index is None:
            raise NotFound(self.kind, item_id)
        return self._items[index]

    def update(self, item_id: str, **changes):
        '''
        Applies a partial update. The entry is replaced only after the merged
        fields validate, so a failed update leaves the entry untouched.
        '''
        index = self._index(item_id)
        if index is None:
            raise NotFound(self.kind, item_id)
        if "id" in changes:
            raise InvalidInput(f"{self.kind} id cannot be changed")
        merged = self._items[index].fields()
        merged.update(changes)
        updated = self.entity.create(item_id, merged)
        self._items[index] = updated
        return updated

    def remove(self, item_id: str):
        index = self._index(item_id)
        if index is None:
            raise NotFound(self.kind, item_id)
        return self._items.pop(index)

    def items(self) -> List:
        return list(self._items)

    def ids(self) -> List[str]:
        return [item.id for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(list(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other):
        if not isinstance(other, Registry) or type(self) is not type(other):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    @classmethod
    def from_list(cls, data):
        if not isinstance(data, list):
            raise InvalidInput(f"{cls.kind} list must be a list")
        return cls([cls.entity.from_dict(entry) for entry in data])

    def to_list(self):
        return [item.to_dict() for item in self._items]


class GuestRegistry(Registry):
    entity = Guest
    kind = "Guest"

    def count_by_rsvp_status(self, status: str) -> int:
        if status not in RSVP_STATUSES:
            raise InvalidInput(f"Unknown RSVP status '{status}'")
        return sum(1 for g in self._items if g.rsvp_status == status)

    def rsvp_breakdown(self) -> Dict[str, int]:
        return {status: self.count_by_rsvp_status(status) for status in RSVP_STATUSES}

    def expected_headcount(self) -> int:
        """Confirmed guests plus their plus-ones."""
        return sum(g.headcount() for g in self._items if g.rsvp_status == RSVP_CONFIRMED)


class TimelineTracker(Registry):
    entity = Task
    kind = "Task"

    def toggle_completed(self, task_id: str) -> bool:
        task = self.get(task_id)
        task.completed = not task.completed
        return task.completed

    def count_completed(self) -> int:
        return sum(1 for t in self._items if t.completed)

    def progress_percentage(self) -> int:
        if not self._items:
            return 0
        return round(self.count_completed() * 100 / len(self._items))

    def overdue(self, today: Optional[date] = None) -> List[Task]:
        today = today or date.today()
        return [t for t in self._items if t.is_overdue(today)]

    def add_checklist(self, wedding_date: Optional[date] = None) -> List[str]:
        '''
        Appends the standard planning checklist, one task per item, with the
        timeframe as category. With a wedding date each task is due that many
        days before it; without one the tasks have no due date.
        '''
        ids = []
        for timeframe, days_before, items in PLANNING_CHECKLIST:
            due = None
            if wedding_date is not None and wedding_date.toordinal() > days_before:
                due = wedding_date - timedelta(days=days_before)
            for name, priority in items:
                ids.append(self.add(task=name, category=timeframe, due_date=due, priority=priority))
        return ids


class VendorRegistry(Registry):
    entity = Vendor
    kind = "Vendor"

    def count_by_status(self, status: str) -> int:
        if status not in VENDOR_STATUSES:
            raise InvalidInput(f"Unknown vendor status '{status}'")
        return sum(1 for v in self._items if v.status == status)

    def total_cost(self, include_cancelled: bool = False) -> int:
        return sum(v.cost for v in self._items if include_cancelled or v.status != "Cancelled")
