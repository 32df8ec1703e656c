import logging
from typing import Any

import pymongo
from bson import ObjectId
from bson.errors import BSONError
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from tasky.core.config import settings
from tasky.core.errors import MissingField, StoreError, TodoNotFound
from tasky.models.todo import Todo, is_blank, parse_object_id

logger = logging.getLogger(__name__)

STORE_ERRORS = (PyMongoError, BSONError)
DECODE_ERRORS = (ValidationError, KeyError, TypeError)

NOT_OWNED = "Todo not found or not owned by user"


def _require(value: str, message: str) -> str:
    if is_blank(value):
        raise MissingField(message)
    return value


class TodoService:
    def __init__(self, collection: Any, timeout_seconds: float | None = None):
        self.collection = collection
        self.timeout_seconds = (
            settings.mongo_timeout_seconds if timeout_seconds is None else timeout_seconds
        )

    def _bounded(self):
        return pymongo.timeout(self.timeout_seconds)

    def fetch_one(self, todo_id: str) -> Todo:
        oid = parse_object_id(todo_id)

        try:
            with self._bounded():
                doc = self.collection.find_one({"_id": oid})
        except STORE_ERRORS as exc:
            logger.exception("find_one failed for todo %s", todo_id)
            raise StoreError("Failed to fetch todo", "find_one") from exc

        if doc is None:
            raise TodoNotFound()

        try:
            return Todo.from_document(doc)
        except DECODE_ERRORS as exc:
            logger.exception("Stored todo %s could not be decoded", todo_id)
            raise StoreError("Failed to decode todo", "find_one") from exc

    def fetch_all_for_user(self, userid: str) -> list[Todo]:
        # drained completely before decoding so a failure halfway through
        # never yields a truncated list
        try:
            with self._bounded():
                docs = list(self.collection.find({"userid": userid}))
        except STORE_ERRORS as exc:
            logger.exception("find failed for user %s", userid)
            raise StoreError("Failed to fetch todos", "find") from exc

        try:
            return [Todo.from_document(doc) for doc in docs]
        except DECODE_ERRORS as exc:
            logger.exception("A stored todo of user %s could not be decoded", userid)
            raise StoreError("Failed to decode todo", "find") from exc

    def create(self, userid: str, todo: Todo) -> str:
        _require(userid, "User ID is required")

        doc = todo.to_new_document(ObjectId(), userid)
        try:
            with self._bounded():
                result = self.collection.insert_one(doc)
        except STORE_ERRORS as exc:
            logger.exception("insert_one failed for user %s", userid)
            raise StoreError("Failed to create todo", "insert_one") from exc

        new_id = str(result.inserted_id)
        logger.info("Created todo %s for user %s", new_id, userid)
        return new_id

    def update(self, todo: Todo) -> tuple[int, int]:
        """Apply the submitted fields to the owner's todo.

        Returns ``(matched_count, modified_count)``.
        """
        if not todo.has_identity():
            raise MissingField("Todo ID and User ID are required")

        query = {"_id": todo.object_id(), "userid": todo.userid}
        try:
            with self._bounded():
                result = self.collection.update_one(
                    query, {"$set": todo.to_update_fields()}
                )
        except STORE_ERRORS as exc:
            logger.exception("update_one failed for todo %s", todo.id)
            raise StoreError("Failed to update todo", "update_one") from exc

        if result.matched_count == 0:
            raise TodoNotFound(NOT_OWNED)

        logger.info("Updated todo %s for user %s", todo.id, todo.userid)
        return result.matched_count, result.modified_count

    def delete_one(self, todo_id: str, userid: str) -> int:
        if is_blank(todo_id) or is_blank(userid):
            raise MissingField("Todo ID and User ID are required")
        oid = parse_object_id(todo_id)

        try:
            with self._bounded():
                result = self.collection.delete_one({"_id": oid, "userid": userid})
        except STORE_ERRORS as exc:
            logger.exception("delete_one failed for todo %s", todo_id)
            raise StoreError("Failed to delete todo", "delete_one") from exc

        if result.deleted_count == 0:
            raise TodoNotFound(NOT_OWNED)

        logger.info("Deleted todo %s of user %s", todo_id, userid)
        return result.deleted_count

    def delete_all_for_user(self, userid: str) -> int:
        _require(userid, "User ID is required")

        try:
            with self._bounded():
                result = self.collection.delete_many({"userid": userid})
        except STORE_ERRORS as exc:
            logger.exception("delete_many failed for user %s", userid)
            raise StoreError("Failed to delete todos", "delete_many") from exc

        logger.info("Cleared %d todos of user %s", result.deleted_count, userid)
        return result.deleted_count
