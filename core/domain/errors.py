class TaskError(Exception):
    """Base class for errors raised by the task domain."""


class ValidationError(TaskError):
    """A payload is missing a required field or carries an empty one."""


class NotFoundError(TaskError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class UpstreamError(TaskError):
    """The persistence layer or the request body could not be processed."""
