"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from quizapp.config import settings
from quizapp.core.errors import QuizAppError
from quizapp.api import (
    health_router,
    auth_router,
    quiz_router,
    results_router,
    dashboard_router,
)
from quizapp.schemas.common import ErrorResponse

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s  %(name)-25s  %(levelname)-8s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Quiz app backend starting…")
    yield
    logger.info("✅ Quiz app backend shut down")


app = FastAPI(
    title="Quiz App API",
    description="Quiz taking, grading and student analytics",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Middleware ─────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("[%s] %s", request.method, request.url.path)
    return await call_next(request)


# ── Error handling ─────────────────────────────────────────────────────────────


@app.exception_handler(QuizAppError)
async def quiz_app_error_handler(request: Request, exc: QuizAppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(
        error_code=exc.error_code, message=exc.message, details=exc.details
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(health_router, tags=["Health"])
app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(quiz_router, prefix="/api/quiz", tags=["Quiz"])
app.include_router(results_router, prefix="/api/results", tags=["Results"])
app.include_router(dashboard_router, prefix="/api/dashboard", tags=["Dashboard"])


@app.get("/")
async def root():
    return {
        "name": "Quiz App API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
