"""Timeline task entity: what has to be done, by when, and whether it is done."""
from datetime import date
from typing import Optional

from wedding.utilities.validators import TaskInput, TaskRecord, validate_input


class Task:
    FIELDS = ("task", "category", "due_date", "completed", "priority")

    def __init__(self, id: str, task: str = "", category: str = "", due_date: Optional[date] = None,
                 completed: bool = False, priority: str = "Medium"):
        self.id = id
        self.task = task
        self.category = category
        self.due_date = due_date
        self.completed = completed
        self.priority = priority

    @classmethod
    def create(cls, id: str, fields: dict) -> "Task":
        data = validate_input(TaskInput, fields)
        return cls(id=id, **data.model_dump())

    def fields(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS}

    def is_overdue(self, today: date) -> bool:
        return not self.completed and self.due_date is not None and self.due_date < today

    def __eq__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        state = "done" if self.completed else "open"
        return f"Task({self.id!r}, {self.task!r}, {state})"

    @staticmethod
    def from_dict(data):
        record = validate_input(TaskRecord, data)
        return Task(**record.model_dump())

    def to_dict(self):
        return {
            "id": self.id,
            "task": self.task,
            "category": self.category,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "completed": self.completed,
            "priority": self.priority,
        }
