"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from corpus.application.config import ConfigError


class PanelEditError(Exception):
    """Raised when a panel edit is rejected by validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Panel edit rejected: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(PanelEditError)
    async def panel_edit_error_handler(
        request: Request, exc: PanelEditError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Panel edit rejected",
                "error_type": "panel_edit",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid panel snapshot",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )
