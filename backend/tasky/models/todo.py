from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, field_validator

from tasky.core.errors import InvalidTodoId

# keys the server owns; never copied from a client body into the store
SERVER_KEYS = ("_id", "id", "userid")

ZERO_ID = ObjectId("0" * 24)


def parse_object_id(raw: str) -> ObjectId:
    if not ObjectId.is_valid(raw):
        raise InvalidTodoId(raw)
    return ObjectId(raw)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class Todo(BaseModel):
    """A todo as it travels over the wire.

    ``id`` is the hex form of the store's ``_id``. Task content is passed
    through untouched, declared fields and any others the client attaches.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    userid: str = ""

    title: Any = None
    description: Any = None
    completed: Any = None

    @field_validator("id")
    @classmethod
    def _check_id(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        if not ObjectId.is_valid(v):
            raise ValueError("id must be a 24-character hex ObjectId")
        return v.lower()

    def has_identity(self) -> bool:
        """True when both the id (non-zero) and the owner are set."""
        if not self.id or is_blank(self.userid):
            return False
        return ObjectId(self.id) != ZERO_ID

    def object_id(self) -> ObjectId:
        return ObjectId(self.id)

    def _sent_fields(self) -> dict[str, Any]:
        # only what the client put in the body, nulls included
        declared = type(self).model_fields
        fields = {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name in declared
        }
        fields.update(self.model_extra or {})
        return fields

    def to_new_document(self, oid: ObjectId, userid: str) -> dict[str, Any]:
        doc = self._sent_fields()
        for key in SERVER_KEYS:
            doc.pop(key, None)
        doc["_id"] = oid
        doc["userid"] = userid
        return doc

    def to_update_fields(self) -> dict[str, Any]:
        """Fields the client actually sent, ready for ``$set``."""
        fields = self._sent_fields()
        fields.pop("_id", None)
        fields.pop("id", None)
        return fields

    def to_wire(self) -> dict[str, Any]:
        """The record as stored, with ``_id`` shown as the hex ``id``."""
        return self._sent_fields()

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Todo":
        data = dict(doc)
        oid = data.pop("_id")
        data["id"] = str(oid)
        return cls.model_validate(data)
