import logging

from fastapi import FastAPI, Request
from pymongo import MongoClient
from pymongo.collection import Collection

from .config import settings

logger = logging.getLogger(__name__)


def create_client(uri: str | None = None) -> MongoClient:
    # pymongo connects lazily; this does not touch the network
    return MongoClient(uri or settings.mongo_uri)


def open_collection(client: MongoClient, name: str) -> Collection:
    return client[settings.mongo_db][name]


def init_db(app: FastAPI) -> None:
    client = create_client()
    app.state.mongo_client = client
    app.state.todo_collection = open_collection(client, settings.todo_collection)
    logger.info(
        "Using collection %s.%s", settings.mongo_db, settings.todo_collection
    )


def close_db(app: FastAPI) -> None:
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()
        app.state.mongo_client = None
        app.state.todo_collection = None


def get_todo_collection(request: Request) -> Collection:
    collection = getattr(request.app.state, "todo_collection", None)
    if collection is None:
        raise RuntimeError("Database not initialised; was the startup hook run?")
    return collection
