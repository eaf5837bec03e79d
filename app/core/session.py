# app/core/session.py

"""
Learner session helpers.

The session lives in Starlette's signed cookie (SessionMiddleware) and
only carries an expiry timestamp, so there is nothing for a learner to
copy or tamper with.
"""

import secrets
import time

from fastapi import HTTPException, Request, status

from app.core.config import settings

COOKIE_NAME = "fethink_ethics_session"
_EXPIRY_KEY = "exp"


def access_code_matches(code: str) -> bool:
    """Constant-time comparison against the configured access code."""
    return secrets.compare_digest(
        code.encode("utf-8"),
        settings.ACCESS_CODE.encode("utf-8"),
    )


def start_session(request: Request) -> None:
    request.session[_EXPIRY_KEY] = int(time.time()) + settings.SESSION_SECONDS


def clear_session(request: Request) -> None:
    request.session.clear()


def is_session_valid(request: Request) -> bool:
    expires_at = request.session.get(_EXPIRY_KEY)
    if not isinstance(expires_at, int):
        return False
    return int(time.time()) < expires_at


def require_session(request: Request) -> None:
    """FastAPI dependency guarding the marking routes."""
    if not is_session_valid(request):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized",
        )
