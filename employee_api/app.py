"""
FastAPI application for the Employee API.

Features:
- Reads configuration from the environment (and a `.env` file if present).
- Configures logging and CORS middleware.
- Handles request validation errors with a custom 400 response and hides
  internal details of unhandled errors behind a generic 500 response.
- Includes routers for the greeting and health endpoints.
- Creates the employee table at startup when DATABASE_URL is set.

API:
    Title: Employee API
    Version: 0.1.0
    License: MIT
"""
import logging
from contextlib import asynccontextmanager

import fastapi
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from employee_api import config
from employee_api.api.routes import greeting, health
from employee_api.middleware.logging import setup_logging
from employee_api.storage import init_database

logging.basicConfig(level=logging.DEBUG if config.LOG_LEVEL >= 2 else logging.INFO)
logger = logging.getLogger(__name__)

BAD_REQUEST_DETAIL = "400: Bad request. There are missing field(s), it is formed improperly, or is invalid."
INTERNAL_ERROR_DETAIL = "500: Internal server error. Please contact support if this persists."


@asynccontextmanager
async def lifespan(_app: fastapi.FastAPI):
    if config.DATABASE_URL:
        init_database()
    else:
        logger.info("DATABASE_URL not set, skipping database initialization")
    yield


app = fastapi.FastAPI(
    title=config.APP_TITLE,
    description="Greeting service with employee and loan data holders",
    version=config.APP_VERSION,
    license_info={
        "name": "MIT License",
        "url": "https://opensource.org/licenses/MIT",
    },
    root_path=config.ROOT_PATH,
    lifespan=lifespan,
)

# Credentials cannot be combined with a wildcard origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request validation errors.

    Returns a 400 JSON response when the incoming request is malformed
    or missing required fields. Details are logged, not returned.
    """
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")

    return JSONResponse(status_code=400, content={"detail": BAD_REQUEST_DETAIL})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors.

    Logs the full exception and returns a generic message so that stack
    traces and internals never reach the client.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": INTERNAL_ERROR_DETAIL,
            "error_type": "internal_error",
        },
    )


app.include_router(greeting.router)
app.include_router(health.router)

app = setup_logging(app)  # type: ignore[assignment]
