from typing import Any

from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.domain.errors import NotFoundError, UpstreamError
from core.domain.models.task import NewTask, Task, TaskChanges, utc_now
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo
from infrastructure.mongo.session.client import get_database


class MongoTaskRepository(TaskRepository):
    """
    TaskRepository backed by the `tasks` collection (synchronous driver).

    Driver errors are re-raised as UpstreamError.
    """

    def __init__(self, mongo_uri: str, db_name: str) -> None:
        self.db = get_database(mongo_uri, db_name)
        self.collection: Collection[Any] = self.db.tasks

    def list(self) -> list[Task]:
        try:
            docs = self.collection.find().sort("created_at", DESCENDING)
            return [TaskMongo(**doc).to_domain() for doc in docs]
        except PyMongoError as e:
            raise UpstreamError(f"Listing tasks failed: {e}") from e

    def get(self, task_id: str) -> Task | None:
        """
        Loads a task by id.

        Args:
            task_id (str): the task id.

        Returns:
            Task | None: the task, or None if no document has that id.
        """
        try:
            doc = self.collection.find_one({"_id": task_id})
        except PyMongoError as e:
            raise UpstreamError(f"Loading task {task_id} failed: {e}") from e
        if not doc:
            return None
        return TaskMongo(**doc).to_domain()

    def create(self, new_task: NewTask) -> Task:
        task = Task.create(new_task)
        document = TaskMongo.from_domain(task).model_dump(by_alias=True)
        try:
            self.collection.insert_one(document)
        except PyMongoError as e:
            raise UpstreamError(f"Creating task failed: {e}") from e
        return task

    def update(self, task_id: str, changes: TaskChanges) -> Task:
        """
        Applies a partial update in a single round trip.

        Raises:
            NotFoundError: if no document has that id.
        """
        fields = {
            name: value
            for name, value in (
                ("title", changes.title),
                ("description", changes.description),
                ("is_completed", changes.is_completed),
            )
            if value is not None
        }
        fields["updated_at"] = utc_now()
        try:
            doc = self.collection.find_one_and_update(
                {"_id": task_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise UpstreamError(f"Updating task {task_id} failed: {e}") from e
        if doc is None:
            raise NotFoundError(task_id)
        return TaskMongo(**doc).to_domain()

    def delete(self, task_id: str) -> None:
        try:
            result = self.collection.delete_one({"_id": task_id})
        except PyMongoError as e:
            raise UpstreamError(f"Deleting task {task_id} failed: {e}") from e
        if result.deleted_count == 0:
            raise NotFoundError(task_id)
