from core.domain.models.task import NewTask, Task
from core.domain.ports.task_repository import TaskRepository


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, new_task: NewTask) -> Task:
        return self._repository.create(new_task)
