from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from core.domain.errors import ValidationError


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _is_blank(value: str) -> bool:
    return len(value.strip()) == 0


@dataclass(slots=True)
class NewTask:
    title: str
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.title or _is_blank(self.title):
            raise ValidationError("Title is required")


@dataclass(slots=True)
class TaskChanges:
    """Partial update. A field left as None keeps the stored value."""

    title: str | None = None
    description: str | None = None
    is_completed: bool | None = None

    def __post_init__(self) -> None:
        if self.title is not None and _is_blank(self.title):
            raise ValidationError("Title cannot be empty")


@dataclass(slots=True)
class Task:
    id: str
    title: str
    created_at: str
    description: str | None = None
    is_completed: bool = False
    updated_at: str | None = None

    @classmethod
    def create(cls, new_task: NewTask) -> "Task":
        return cls(
            id=str(uuid4()),
            title=new_task.title,
            description=new_task.description,
            created_at=utc_now(),
        )

    def apply(self, changes: TaskChanges) -> None:
        if changes.title is not None:
            self.title = changes.title
        if changes.description is not None:
            self.description = changes.description
        if changes.is_completed is not None:
            self.is_completed = changes.is_completed
        self.updated_at = utc_now()
