from typing import Optional
import logging

from fastapi import APIRouter, HTTPException, Request, status

from app.core.session import access_code_matches, clear_session, start_session
from app.schemas.marking import UnlockRequest

router = APIRouter(tags=["Access"])

logger = logging.getLogger(__name__)


@router.post("/unlock")
def unlock(request: Request, payload: Optional[UnlockRequest] = None):
    payload = payload or UnlockRequest()
    code = str(payload.code or "").strip()
    if not code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="missing_code",
        )

    if not access_code_matches(code):
        logger.warning("Rejected unlock attempt with incorrect access code")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="incorrect_code",
        )

    start_session(request)
    return {"ok": True}


@router.post("/logout")
def logout(request: Request):
    clear_session(request)
    return {"ok": True}
