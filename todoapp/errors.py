class TaskError(Exception):
    """Base for errors that map onto an HTTP response."""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskError):
    status_code = 400
    default_message = 'Invalid task data'


class NotFound(TaskError):
    status_code = 404
    default_message = 'Task not found'


class StoreError(TaskError):
    status_code = 500
    default_message = 'Task store is unavailable'


class StartupError(Exception):
    """The store could not be reached while the app was being built."""
