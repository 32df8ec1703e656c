from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasky.core.config import settings
from tasky.core.database import init_db, close_db
from tasky.core.logging_config import setup_logging
from tasky.api import api_router
from tasky.api.error_handlers import register_error_handlers

setup_logging(settings.log_level)

app = FastAPI(title="Tasky Todo API (FastAPI + MongoDB + JWT)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

@app.on_event("startup")
def on_startup():
    init_db(app)

@app.on_event("shutdown")
def on_shutdown():
    close_db(app)

@app.get("/")
def health():
    return {"message": "OK"}

app.include_router(api_router)
