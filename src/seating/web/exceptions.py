"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from seating.application.catalog import CatalogError
from seating.application.config import ConfigError


class UnknownShapeError(Exception):
    """Raised when a path names a base shape the engine does not know."""

    def __init__(self, shape: str) -> None:
        self.shape = shape
        super().__init__(f"Unknown base shape: {shape}")


class InvalidEventError(Exception):
    """Raised when a reducer event cannot be built from the request."""

    def __init__(self, message: str, event_type: str) -> None:
        self.message = message
        self.event_type = event_type
        super().__init__(message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={
                "error": exc.message,
                "error_type": f"catalog_{exc.error_type}",
                "details": exc.details or None,
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(InvalidEventError)
    async def invalid_event_handler(
        request: Request, exc: InvalidEventError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": "invalid_event",
                "details": [{"event_type": exc.event_type}],
            },
        )

    @app.exception_handler(UnknownShapeError)
    async def unknown_shape_handler(
        request: Request, exc: UnknownShapeError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": None,
            },
        )
