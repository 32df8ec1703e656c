from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    mongo_db: str = os.getenv("MONGO_DB", "go-mongodb")
    todo_collection: str = os.getenv("TODO_COLLECTION", "todos")
    # upper bound for every single store call, in seconds
    mongo_timeout_seconds: float = float(os.getenv("MONGO_TIMEOUT_SECONDS", "100"))

    jwt_secret: str = os.getenv("JWT_SECRET", "change-me")
    jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", "60"))
    session_cookie: str = os.getenv("SESSION_COOKIE", "token")

    cors_origins: list[str] = _split_csv(
        os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    )
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
