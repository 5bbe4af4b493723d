import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from core.domain.errors import NotFoundError
from core.domain.models.task import NewTask, Task, TaskChanges
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """
    Fallback store kept in an ordered list for local development.

    Use cases run in the server's threadpool, so every operation holds the
    lock. Callers receive copies; mutating a returned Task does not touch the
    stored one.
    """

    def __init__(self, seed: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = [replace(task) for task in seed]
        self._lock = threading.Lock()

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return -1

    def list(self) -> list[Task]:
        logger.debug("Using mock data for list")
        with self._lock:
            # Appended in creation order, so reversed is newest first.
            return [replace(task) for task in reversed(self._tasks)]

    def get(self, task_id: str) -> Task | None:
        logger.debug(f"Using mock data for get id={task_id}")
        with self._lock:
            index = self._index_of(task_id)
            if index == -1:
                return None
            return replace(self._tasks[index])

    def create(self, new_task: NewTask) -> Task:
        logger.debug("Using mock data for create")
        task = Task.create(new_task)
        with self._lock:
            self._tasks.append(task)
            return replace(task)

    def update(self, task_id: str, changes: TaskChanges) -> Task:
        logger.debug(f"Using mock data for update id={task_id}")
        with self._lock:
            index = self._index_of(task_id)
            if index == -1:
                raise NotFoundError(task_id)
            task = self._tasks[index]
            task.apply(changes)
            return replace(task)

    def delete(self, task_id: str) -> None:
        logger.debug(f"Using mock data for delete id={task_id}")
        with self._lock:
            index = self._index_of(task_id)
            if index == -1:
                raise NotFoundError(task_id)
            del self._tasks[index]


def sample_tasks() -> list[Task]:
    """Two tasks to make a fresh development server show something."""
    return [
        Task.create(
            NewTask(
                title="Sample Task 1",
                description="This is a sample task for development",
            )
        ),
        replace(
            Task.create(
                NewTask(
                    title="Sample Task 2",
                    description="Another sample task for testing",
                )
            ),
            is_completed=True,
        ),
    ]
