import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Values shipped in .env.example; treated the same as a missing credential.
_PLACEHOLDER_VALUES = {"", "your_database_url", "your_mongo_uri"}

STORE_MEMORY = "memory"
STORE_PEEWEE = "peewee"
STORE_MONGO = "mongo"


class ConfigurationError(RuntimeError):
    """The environment does not describe a usable task store."""


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8081
    reload: bool = True
    log_level: str = "info"
    app_env: str = "development"
    task_store: str = STORE_PEEWEE
    use_mock_data: bool = False
    database_url: str | None = None
    mongo_uri: str | None = None
    mongo_db_name: str = "tasks_api"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    def has_credentials(self, store: str) -> bool:
        if store == STORE_PEEWEE:
            value = self.database_url
        elif store == STORE_MONGO:
            value = self.mongo_uri
        else:
            return True
        return value is not None and value.strip() not in _PLACEHOLDER_VALUES


def load_settings() -> Settings:
    """
    Reads the settings from the environment, loading `.env` first.

    Raises:
        ConfigurationError: if PORT is not an integer or TASK_STORE is unknown.
    """
    load_dotenv()

    port_str = os.getenv("PORT", "8081")
    try:
        port = int(port_str)
    except ValueError as e:
        raise ConfigurationError(f"PORT must be an integer, got {port_str!r}") from e

    task_store = os.getenv("TASK_STORE", STORE_PEEWEE).strip().lower()
    if task_store not in {STORE_MEMORY, STORE_PEEWEE, STORE_MONGO}:
        raise ConfigurationError(f"Unknown TASK_STORE {task_store!r}")

    return Settings(
        host=os.getenv("HOST", "127.0.0.1"),
        port=port,
        reload=_as_bool(os.getenv("RELOAD", "true")),
        log_level=os.getenv("LOG_LEVEL", "info"),
        app_env=os.getenv("APP_ENV", "development").strip().lower(),
        task_store=task_store,
        use_mock_data=_as_bool(os.getenv("USE_MOCK_DATA", "false")),
        database_url=os.getenv("DATABASE_URL"),
        mongo_uri=os.getenv("MONGO_URI"),
        mongo_db_name=os.getenv("MONGO_DB_NAME", "tasks_api"),
    )
