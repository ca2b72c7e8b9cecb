# spendwise/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from spendwise.config import get_settings
from spendwise.db import create_db_and_tables
from spendwise.errors import AppError, describe_pydantic_errors
from spendwise.observability import RequestLogMiddleware, configure_logging
from spendwise.responses import error_response
from spendwise.routers.auth import router as auth_router
from spendwise.routers.records import (
    accounts_router,
    budgets_router,
    categories_router,
    transactions_router,
)
from spendwise.routers.stats import router as stats_router
from spendwise.routers.system import router as system_router

API_PREFIX = "/api/v1"

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("spendwise")


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.auto_create_tables:
        create_db_and_tables()
    yield


app = FastAPI(
    title="SpendWise API",
    version="0.1.0",
    description="Personal budget tracker: accounts, categories, transactions, budgets.",
    docs_url="/api-docs",
    lifespan=lifespan,
)

# Middleware order: session first (innermost), then logging, then CORS (outermost)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
    same_site="none" if settings.is_production else "lax",
    https_only=settings.is_production,
)
app.add_middleware(RequestLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.client_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Error envelope ----------


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(400, describe_pydantic_errors(exc))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    # details stay in the log, never in the response
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Something went wrong. Please try again later.")


# ---------- Routers ----------

app.include_router(system_router)
app.include_router(auth_router, prefix=API_PREFIX)
app.include_router(accounts_router, prefix=API_PREFIX)
app.include_router(categories_router, prefix=API_PREFIX)
app.include_router(transactions_router, prefix=API_PREFIX)
app.include_router(budgets_router, prefix=API_PREFIX)
app.include_router(stats_router, prefix=API_PREFIX)
