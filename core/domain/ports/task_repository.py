from abc import ABC, abstractmethod

from core.domain.models.task import NewTask, Task, TaskChanges


class TaskRepository(ABC):
    @abstractmethod
    def list(self) -> list[Task]:
        """Return every task, newest first."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: str) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, new_task: NewTask) -> Task:
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: str, changes: TaskChanges) -> Task:
        """Merge `changes` into the stored task. Raises NotFoundError."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: str) -> None:
        """Remove the task. Raises NotFoundError."""
        raise NotImplementedError
