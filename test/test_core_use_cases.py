import unittest

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.errors import NotFoundError, ValidationError
from core.domain.models.task import NewTask, TaskChanges
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


class TaskValuesTests(unittest.TestCase):
    def test_new_task_requires_title(self) -> None:
        for title in ("", "   ", "\n\t"):
            with self.assertRaises(ValidationError):
                NewTask(title=title)

    def test_changes_reject_blank_title(self) -> None:
        with self.assertRaises(ValidationError):
            TaskChanges(title="  ")

    def test_changes_allow_missing_title(self) -> None:
        changes = TaskChanges(is_completed=True)
        self.assertIsNone(changes.title)


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def test_create_task_assigns_id_and_defaults(self) -> None:
        use_case = CreateTaskUseCase(self.repo)

        task = use_case.execute(NewTask(title="Design architecture", description="Hexagonal"))

        self.assertTrue(task.id)
        self.assertFalse(task.is_completed)
        self.assertIsNotNone(task.created_at)
        self.assertIsNone(task.updated_at)
        self.assertEqual(self.repo.get(task.id), task)

    def test_create_task_ids_are_unique(self) -> None:
        use_case = CreateTaskUseCase(self.repo)

        ids = {use_case.execute(NewTask(title=f"Task {i}")).id for i in range(50)}

        self.assertEqual(len(ids), 50)

    def test_get_task_missing_returns_none(self) -> None:
        self.assertIsNone(GetTaskUseCase(self.repo).execute("missing"))

    def test_list_tasks_newest_first(self) -> None:
        first = self.repo.create(NewTask(title="first"))
        second = self.repo.create(NewTask(title="second"))

        tasks = ListTasksUseCase(self.repo).execute()

        self.assertEqual([t.id for t in tasks], [second.id, first.id])

    def test_update_task_merges_and_persists(self) -> None:
        original = self.repo.create(NewTask(title="Initial", description="d1"))

        updated = UpdateTaskUseCase(self.repo).execute(
            original.id,
            TaskChanges(title="Updated", is_completed=True),
        )

        self.assertEqual(updated.id, original.id)
        self.assertEqual(updated.title, "Updated")
        self.assertEqual(updated.description, "d1")
        self.assertTrue(updated.is_completed)
        self.assertEqual(updated.created_at, original.created_at)
        self.assertIsNotNone(updated.updated_at)
        self.assertEqual(self.repo.get(original.id), updated)

    def test_update_without_title_keeps_title_and_refreshes_updated_at(self) -> None:
        original = self.repo.create(NewTask(title="Keep me"))
        use_case = UpdateTaskUseCase(self.repo)

        first = use_case.execute(original.id, TaskChanges())
        second = use_case.execute(original.id, TaskChanges(description="more"))

        self.assertEqual(second.title, "Keep me")
        self.assertIsNotNone(first.updated_at)
        self.assertGreaterEqual(second.updated_at, first.updated_at)

    def test_update_missing_task_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            UpdateTaskUseCase(self.repo).execute("missing", TaskChanges(title="x"))

    def test_delete_task_removes_record(self) -> None:
        task = self.repo.create(NewTask(title="Delete"))

        DeleteTaskUseCase(self.repo).execute(task.id)

        self.assertIsNone(self.repo.get(task.id))

    def test_delete_missing_task_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            DeleteTaskUseCase(self.repo).execute("missing")
        self.assertEqual(ctx.exception.task_id, "missing")


if __name__ == "__main__":
    unittest.main()
