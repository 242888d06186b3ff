"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from carcass.application.config import ConfigError


class TemplateGenerationError(Exception):
    """Raised when template parameters cannot produce a cabinet."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Generation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {
                        "path": d.get("path"),
                        "message": d.get("message"),
                        "error_type": d.get("error_type"),
                    }
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(TemplateGenerationError)
    async def generation_error_handler(
        request: Request, exc: TemplateGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cabinet generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )
