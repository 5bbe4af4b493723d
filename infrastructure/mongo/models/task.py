from pydantic import BaseModel, Field

from core.domain.models.task import Task


class TaskMongo(BaseModel):
    """
    Task document as stored in MongoDB.

    The task id doubles as the document `_id`.
    """

    id: str = Field(alias="_id")
    title: str
    description: str | None = None
    is_completed: bool = False
    created_at: str
    updated_at: str | None = None

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Task:
        """
        Converts the document into the domain entity.

        Returns:
            Task: the domain entity.
        """
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            is_completed=self.is_completed,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskMongo":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            is_completed=task.is_completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
