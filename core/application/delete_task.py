from core.domain.ports.task_repository import TaskRepository


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str) -> None:
        self._repository.delete(task_id)
