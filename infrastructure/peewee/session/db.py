from peewee import DatabaseProxy
from playhouse.db_url import connect

# Models bind to the proxy; init_db() points it at the configured database.
db = DatabaseProxy()


def init_db(database_url: str) -> None:
    if db.obj is not None and not db.is_closed():
        db.close()
    db.initialize(connect(database_url))
    db.connect(reuse_if_open=True)
