# app/main.py
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from app.core.config import settings
from app.core.log_config import configure_logging
from app.core.session import COOKIE_NAME

# Import routers (router objects, not modules)
from app.api.task import router as task_router
from app.api.auth import router as auth_router
from app.api.marking import router as marking_router

configure_logging()

app = FastAPI(
    title="AI Ethics Automarker",
    version="1.0.0"
)

# --------------------------------------------------
# CORS CONFIG
# --------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------------------------
# SIGNED SESSION COOKIE
# --------------------------------------------------
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.COOKIE_SECRET,
    session_cookie=COOKIE_NAME,
    max_age=settings.SESSION_SECONDS,
    same_site="lax",
    https_only=settings.COOKIE_SECURE,
)


# --------------------------------------------------
# ERROR ENVELOPE: {"ok": false, "error": "<code>"}
# --------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"ok": False, "error": "invalid_request"},
    )


# --------------------------------------------------
# API ROUTES
# --------------------------------------------------

# Task config (question, template, word targets)
app.include_router(
    task_router,
    prefix="/api",
)

# Access code unlock / logout
app.include_router(
    auth_router,
    prefix="/api",
)

# Marking (session required)
app.include_router(
    marking_router,
    prefix="/api",
)


# --------------------------------------------------
# HEALTH CHECK
# --------------------------------------------------
@app.get("/health", response_class=PlainTextResponse)
def health_check():
    return "ok"


# --------------------------------------------------
# FRONTEND (mounted last so API routes win)
# --------------------------------------------------
if os.path.isdir(settings.STATIC_DIR):
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="public")
