from dotenv import load_dotenv
from fastapi import FastAPI, Request
from starlette.types import Receive, Scope, Send

from backend_fastapi.api.deps import request_handler
from backend_fastapi.api.server import RequestHandler
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import get_task_repository

# Load environment variables from .env file
load_dotenv()


class RequestHandlerApp:
    """ASGI adapter around RequestHandler.

    Starlette only restricts methods for function endpoints, so mounting an
    ASGI callable lets every method, TRACE and PROPFIND included, reach our
    own route table.
    """

    def __init__(self, handler: RequestHandler) -> None:
        self._handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = await self._handler(Request(scope, receive))
        await response(scope, receive, send)


def create_app(repository: TaskRepository | None = None) -> FastAPI:
    """
    Builds the ASGI app. Routing is done by our own route table, so FastAPI
    only contributes a single catch-all route and no generated docs.
    """
    if repository is None:
        repository = get_task_repository()

    app = FastAPI(
        title="Tasks API",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_route(
        "/{full_path:path}",
        RequestHandlerApp(request_handler(repository)),
        include_in_schema=False,
    )
    return app
