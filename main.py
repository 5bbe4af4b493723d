import logging

import uvicorn

from infrastructure.config import load_settings

logger = logging.getLogger(__name__)


def run() -> None:
    settings = load_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info(
        f"[{settings.app_env}] Starting server at http://{settings.host}:{settings.port} "
        f"(Reload: {settings.reload})"
    )
    logger.info(
        f"API endpoints available at http://{settings.host}:{settings.port}/api/tasks"
    )

    uvicorn.run(
        "backend_fastapi.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
