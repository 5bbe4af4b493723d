from backend_fastapi.api.routes.tasks import TaskHandler, task_routes
from backend_fastapi.api.routing import Router
from backend_fastapi.api.server import RequestHandler
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import (
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_update_task_use_case,
)


def task_handler(repository: TaskRepository) -> TaskHandler:
    return TaskHandler(
        list_tasks=get_list_tasks_use_case(repository),
        get_task=get_get_task_use_case(repository),
        create_task=get_create_task_use_case(repository),
        update_task=get_update_task_use_case(repository),
        delete_task=get_delete_task_use_case(repository),
    )


def router(repository: TaskRepository) -> Router:
    return Router(task_routes(task_handler(repository)))


def request_handler(repository: TaskRepository) -> RequestHandler:
    return RequestHandler(router(repository))
