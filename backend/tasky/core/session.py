import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from jose import JWTError
from starlette.requests import Request

from .config import settings
from .security import decode_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionOutcome:
    authorized: bool
    principal: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def allow(cls, principal: str) -> "SessionOutcome":
        return cls(authorized=True, principal=principal)

    @classmethod
    def deny(cls, reason: str) -> "SessionOutcome":
        return cls(authorized=False, reason=reason)


class SessionValidator(Protocol):
    def validate(self, request: Request) -> SessionOutcome: ...


def _extract_token(request: Request, cookie_name: str) -> Optional[str]:
    header = request.headers.get("authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    cookie = request.cookies.get(cookie_name)
    return cookie or None


class JWTSessionValidator:
    """Accepts a signed JWT from the bearer header or the session cookie."""

    def __init__(self, cookie_name: str = settings.session_cookie):
        self.cookie_name = cookie_name

    def validate(self, request: Request) -> SessionOutcome:
        token = _extract_token(request, self.cookie_name)
        if token is None:
            return SessionOutcome.deny("Missing session token")

        try:
            payload = decode_token(token)
        except JWTError as exc:
            logger.debug("Token rejected: %s", exc)
            return SessionOutcome.deny("Invalid session token")

        subject = payload.get("sub")
        if not subject:
            return SessionOutcome.deny("Invalid session token")
        return SessionOutcome.allow(subject)
