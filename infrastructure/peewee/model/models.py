from peewee import BooleanField, CharField, Model, TextField

from infrastructure.peewee.session.db import db


class TaskModel(Model):
    id = CharField(primary_key=True)
    title = CharField()
    description = TextField(null=True)
    is_completed = BooleanField(default=False)
    # ISO-8601 UTC text; uniform format keeps lexical order chronological.
    created_at = CharField(index=True)
    updated_at = CharField(null=True)

    class Meta:
        database = db
        table_name = "tasks"
