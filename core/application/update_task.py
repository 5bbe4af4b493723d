from core.domain.models.task import Task, TaskChanges
from core.domain.ports.task_repository import TaskRepository


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str, changes: TaskChanges) -> Task:
        # NotFoundError from the store propagates to the caller.
        return self._repository.update(task_id, changes)
