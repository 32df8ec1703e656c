class TodoError(Exception):
    """Base class for errors that end a todo request.

    Rendered by the global handler as ``{"error": message}`` with
    ``http_status``.
    """

    http_status: int = 500

    def __init__(self, message: str, http_status: int | None = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status


# 4xx: client side

class InvalidTodoId(TodoError):
    http_status = 400

    def __init__(self, raw_id: str):
        super().__init__("Invalid todo ID format")
        self.raw_id = raw_id


class InvalidBody(TodoError):
    http_status = 400

    def __init__(self, message: str = "Invalid request body"):
        super().__init__(message)


class MissingField(TodoError):
    http_status = 400


class TodoNotFound(TodoError):
    http_status = 404

    def __init__(self, message: str = "Todo not found"):
        super().__init__(message)


class SessionRejected(TodoError):
    http_status = 401


# 5xx: store side

class StoreError(TodoError):
    """A store call failed, timed out, or returned an undecodable document."""

    http_status = 500

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.operation = operation
