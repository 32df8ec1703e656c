from datetime import datetime, timedelta, timezone
import uuid

from jose import jwt

from .config import settings


def create_access_token(subject: str, expires_minutes: int | None = None) -> str:
    now = datetime.now(timezone.utc)
    if expires_minutes is None:
        expires_minutes = settings.jwt_expire_minutes
    exp = now + timedelta(minutes=expires_minutes)
    jti = str(uuid.uuid4())

    payload = {
        "sub": subject,
        "exp": exp,
        "iat": now,
        "jti": jti,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
