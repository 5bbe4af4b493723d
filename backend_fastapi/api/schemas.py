from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PayloadError

from core.domain.errors import UpstreamError
from core.domain.models.task import NewTask, TaskChanges

P = TypeVar("P", bound=BaseModel)


class CreateTaskPayload(BaseModel):
    """Body of POST /api/tasks, before the title rule is checked."""

    title: str | None = None
    description: str | None = None

    def to_new_task(self) -> NewTask:
        return NewTask(title=self.title or "", description=self.description)


class UpdateTaskPayload(BaseModel):
    """Body of PUT /api/tasks/:id. Omitted fields stay unchanged."""

    title: str | None = None
    description: str | None = None
    is_completed: bool | None = None

    def to_changes(self) -> TaskChanges:
        return TaskChanges(
            title=self.title,
            description=self.description,
            is_completed=self.is_completed,
        )


async def parse_payload(request: Request, model: type[P]) -> P:
    """
    Reads the request body as JSON into `model`.

    A body that decodes to anything other than an object carries no fields,
    so it is read as an empty payload and left to the title rule.

    Raises:
        UpstreamError: if the body is not JSON or a field has the wrong type.
    """
    try:
        data = await request.json()
    except ValueError as e:
        raise UpstreamError(f"Request body is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        data = {}
    try:
        return model.model_validate(data)
    except PayloadError as e:
        raise UpstreamError(
            f"Unreadable {model.__name__} body ({e.error_count()} errors)"
        ) from e
