from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

# One client per URI; MongoClient keeps its own connection pool.
_clients: dict[str, MongoClient[Any]] = {}


def get_client(mongo_uri: str) -> MongoClient[Any]:
    """
    Returns the shared client for `mongo_uri`, creating it on first use.
    """
    client = _clients.get(mongo_uri)
    if client is None:
        client = MongoClient(mongo_uri)
        _clients[mongo_uri] = client
    return client


def get_database(mongo_uri: str, db_name: str) -> Database[Any]:
    """
    Returns the task database.

    Args:
        mongo_uri: connection string from the settings.
        db_name: database holding the `tasks` collection.
    """
    return get_client(mongo_uri)[db_name]
