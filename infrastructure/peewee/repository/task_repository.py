from peewee import PeeweeException

from core.domain.errors import NotFoundError, UpstreamError
from core.domain.models.task import NewTask, Task, TaskChanges
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db, init_db


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        is_completed=model.is_completed,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self, database_url: str) -> None:
        # Tables are created on start-up; there are no migrations.
        init_db(database_url)
        db.create_tables([TaskModel], safe=True)

    def list(self) -> list[Task]:
        try:
            query = TaskModel.select().order_by(TaskModel.created_at.desc())
            return [_to_domain(t) for t in query]
        except PeeweeException as e:
            raise UpstreamError(f"Listing tasks failed: {e}") from e

    def get(self, task_id: str) -> Task | None:
        try:
            model = TaskModel.get_or_none(TaskModel.id == task_id)
        except PeeweeException as e:
            raise UpstreamError(f"Loading task {task_id} failed: {e}") from e
        return _to_domain(model) if model is not None else None

    def create(self, new_task: NewTask) -> Task:
        task = Task.create(new_task)
        try:
            TaskModel.create(
                id=task.id,
                title=task.title,
                description=task.description,
                is_completed=task.is_completed,
                created_at=task.created_at,
            )
        except PeeweeException as e:
            raise UpstreamError(f"Creating task failed: {e}") from e
        return task

    def update(self, task_id: str, changes: TaskChanges) -> Task:
        try:
            with db.atomic():
                model = TaskModel.get_or_none(TaskModel.id == task_id)
                if model is None:
                    raise NotFoundError(task_id)
                task = _to_domain(model)
                task.apply(changes)
                model.title = task.title
                model.description = task.description
                model.is_completed = task.is_completed
                model.updated_at = task.updated_at
                model.save()
        except PeeweeException as e:
            raise UpstreamError(f"Updating task {task_id} failed: {e}") from e
        return task

    def delete(self, task_id: str) -> None:
        try:
            deleted = TaskModel.delete().where(TaskModel.id == task_id).execute()
        except PeeweeException as e:
            raise UpstreamError(f"Deleting task {task_id} failed: {e}") from e
        if deleted == 0:
            raise NotFoundError(task_id)
