import logging

from fastapi import Depends, Request
from pydantic import ValidationError
from pymongo.collection import Collection

from tasky.core.database import get_todo_collection
from tasky.core.errors import InvalidBody, SessionRejected
from tasky.core.session import JWTSessionValidator, SessionOutcome, SessionValidator
from tasky.models import Todo
from tasky.services.todo_service import TodoService

logger = logging.getLogger(__name__)

_default_validator = JWTSessionValidator()


def get_session_validator() -> SessionValidator:
    return _default_validator


def require_session(
    request: Request,
    validator: SessionValidator = Depends(get_session_validator),
) -> SessionOutcome:
    outcome = validator.validate(request)
    if not outcome.authorized:
        logger.warning(
            "Rejected session on %s %s: %s",
            request.method, request.url.path, outcome.reason,
        )
        raise SessionRejected(outcome.reason or "Unauthorized")
    return outcome


async def read_todo_body(request: Request) -> Todo:
    # declared body params are parsed before any dependency runs; reading the
    # body here keeps it behind the session check
    try:
        data = await request.json()
    except ValueError:
        raise InvalidBody()
    try:
        return Todo.model_validate(data)
    except ValidationError as exc:
        logger.warning("Invalid todo body on %s: %s", request.url.path, exc.errors())
        raise InvalidBody()


def get_todo_service(
    collection: Collection = Depends(get_todo_collection),
) -> TodoService:
    return TodoService(collection)
