from fastapi import Request, Response
from starlette.concurrency import run_in_threadpool

from backend_fastapi.api.request_log import log_error
from backend_fastapi.api.responses import bad_request, created, fail, not_found, ok
from backend_fastapi.api.routing import RouteEntry
from backend_fastapi.api.schemas import (
    CreateTaskPayload,
    UpdateTaskPayload,
    parse_payload,
)
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.errors import NotFoundError, ValidationError

TASKS_PATH = "/api/tasks"
TASK_PATH = "/api/tasks/:id"

TASK_NOT_FOUND = "Task not found"


class TaskHandler:
    """
    HTTP handlers for the task resource.

    Each handler turns one use-case outcome into an envelope response. Any
    outcome other than success is logged before the response is built.
    Use cases run in the threadpool because the database drivers block.
    """

    def __init__(
        self,
        list_tasks: ListTasksUseCase,
        get_task: GetTaskUseCase,
        create_task: CreateTaskUseCase,
        update_task: UpdateTaskUseCase,
        delete_task: DeleteTaskUseCase,
    ) -> None:
        self._list_tasks = list_tasks
        self._get_task = get_task
        self._create_task = create_task
        self._update_task = update_task
        self._delete_task = delete_task

    async def list_tasks(self, request: Request, params: dict[str, str]) -> Response:
        try:
            tasks = await run_in_threadpool(self._list_tasks.execute)
        except Exception as e:
            log_error(
                e,
                request,
                location="TaskHandler.list_tasks",
                service_method="TaskRepository.list",
                status_code=500,
            )
            return fail()
        return ok(tasks, "Tasks retrieved successfully")

    async def get_task(self, request: Request, params: dict[str, str]) -> Response:
        task_id = params["id"]
        try:
            task = await run_in_threadpool(self._get_task.execute, task_id)
        except Exception as e:
            log_error(
                e,
                request,
                location="TaskHandler.get_task",
                service_method="TaskRepository.get",
                task_id=task_id,
                status_code=500,
            )
            return fail()

        if task is None:
            log_error(
                NotFoundError(task_id),
                request,
                location="TaskHandler.get_task",
                service_method="TaskRepository.get",
                task_id=task_id,
                status_code=404,
            )
            return not_found(TASK_NOT_FOUND)
        return ok(task, "Task retrieved successfully")

    async def create_task(self, request: Request, params: dict[str, str]) -> Response:
        try:
            payload = await parse_payload(request, CreateTaskPayload)
            new_task = payload.to_new_task()
            task = await run_in_threadpool(self._create_task.execute, new_task)
        except ValidationError as e:
            log_error(
                e,
                request,
                location="TaskHandler.create_task",
                service_method="TaskRepository.create",
                validation_error=True,
                status_code=400,
            )
            return bad_request(str(e))
        except Exception as e:
            log_error(
                e,
                request,
                location="TaskHandler.create_task",
                service_method="TaskRepository.create",
                status_code=500,
            )
            return fail()
        return created(task, "Task created successfully")

    async def update_task(self, request: Request, params: dict[str, str]) -> Response:
        task_id = params["id"]
        try:
            payload = await parse_payload(request, UpdateTaskPayload)
            changes = payload.to_changes()
            updated = await run_in_threadpool(
                self._update_task.execute, task_id, changes
            )
        except ValidationError as e:
            log_error(
                e,
                request,
                location="TaskHandler.update_task",
                service_method="TaskRepository.update",
                validation_error=True,
                task_id=task_id,
                status_code=400,
            )
            return bad_request(str(e))
        except NotFoundError as e:
            log_error(
                e,
                request,
                location="TaskHandler.update_task",
                service_method="TaskRepository.update",
                task_id=task_id,
                status_code=404,
            )
            return not_found(TASK_NOT_FOUND)
        except Exception as e:
            log_error(
                e,
                request,
                location="TaskHandler.update_task",
                service_method="TaskRepository.update",
                task_id=task_id,
                status_code=500,
            )
            return fail()
        return ok(updated, "Task updated successfully")

    async def delete_task(self, request: Request, params: dict[str, str]) -> Response:
        task_id = params["id"]
        try:
            await run_in_threadpool(self._delete_task.execute, task_id)
        except NotFoundError as e:
            log_error(
                e,
                request,
                location="TaskHandler.delete_task",
                service_method="TaskRepository.delete",
                task_id=task_id,
                status_code=404,
            )
            return not_found(TASK_NOT_FOUND)
        except Exception as e:
            log_error(
                e,
                request,
                location="TaskHandler.delete_task",
                service_method="TaskRepository.delete",
                task_id=task_id,
                status_code=500,
            )
            return fail()
        return ok({"id": task_id}, "Task deleted successfully")


def task_routes(handler: TaskHandler) -> list[RouteEntry]:
    return [
        RouteEntry("GET", TASKS_PATH, handler.list_tasks),
        RouteEntry("POST", TASKS_PATH, handler.create_task),
        RouteEntry("GET", TASK_PATH, handler.get_task),
        RouteEntry("PUT", TASK_PATH, handler.update_task),
        RouteEntry("DELETE", TASK_PATH, handler.delete_task),
    ]
