# admin_dashboard/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from admin_dashboard.api.v1.api import api_router
from admin_dashboard.core.config import settings
from admin_dashboard.core.errors import (
    AppError,
    app_error_handler,
    http_exception_handler,
    rate_limit_handler,
    unexpected_error_handler,
    validation_error_handler,
)
from admin_dashboard.core.limiter import limiter

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Admin dashboard service starting up...")
    yield
    logger.info("Admin dashboard service shutting down...")


app = FastAPI(
    title="Event Admin Dashboard Service",
    version="1.0.0",
    description="""
        Admin API behind the event-ticketing dashboard.

        ## Features

        * **Waitlists**: per-event waitlists, or every waitlist grouped by event
        * **Ticket sales**: hourly sales with running totals for charting
        * **Tickets**: per-event ticket lists with scan/type filters
        * **Page props**: initial data for the server-rendered pages

        ## Authentication

        Every endpoint requires an admin JWT via the `Authorization: Bearer <token>` header.
        """,
    lifespan=lifespan,
)

app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
app.add_exception_handler(Exception, unexpected_error_handler)

app.include_router(api_router, prefix="/api")


@app.get("/")
def read_root():
    return {"status": "Admin dashboard service is running"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
