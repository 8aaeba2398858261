"""FastAPI application factory."""

import logging
from http import HTTPStatus
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from food_registry.api.food_items import router as food_items_router
from food_registry.app_logging import configure_logging
from food_registry.containers import AppContainer
from food_registry.domain.errors import (
    DuplicateIdError,
    FoodRegistryError,
    NotFoundError,
    ValidationError,
)

_STATUS_CODES: dict[type[FoodRegistryError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateIdError: status.HTTP_409_CONFLICT,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(food_items_router)

    @app.exception_handler(FoodRegistryError)
    async def registry_error_handler(
        request: Request, exc: FoodRegistryError
    ) -> JSONResponse:
        status_code = _STATUS_CODES.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        if isinstance(exc, DuplicateIdError):
            logger.error("Rejected request after id collision: %s", exc.message)
        return _error_response(status_code, type(exc).__name__, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        error_type = HTTPStatus(exc.status_code).phrase.replace(" ", "")
        return _error_response(
            exc.status_code, error_type, str(exc.detail), headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = sorted(
            {
                str(error["loc"][1])
                for error in exc.errors()
                if len(error["loc"]) > 1
            }
        )
        message = "Invalid payload"
        if fields:
            message = f"Invalid payload: {', '.join(fields)}"
        return _error_response(
            status.HTTP_400_BAD_REQUEST, ValidationError.__name__, message
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _error_response(
    status_code: int,
    error_type: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"type": error_type, "message": message}},
        headers=headers,
    )
