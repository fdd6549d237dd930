"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from form_progress.api.forms import router as forms_router
from form_progress.app_logging import configure_logging
from form_progress.containers import AppContainer
from form_progress.errors import FormProgressError

_INTERNAL_ERROR_BODY = {"detail": "Internal Server Error"}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Form progress API starting: environment=%s table=%s",
            app.state.container.settings.environment,
            app.state.container.settings.form_table,
        )
        yield
        logger.info("Form progress API stopped")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(forms_router)

    @app.exception_handler(FormProgressError)
    async def form_progress_error_handler(
        request: Request, exc: FormProgressError
    ) -> JSONResponse:
        logger.error(
            "Request failed: %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc.cause or exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_INTERNAL_ERROR_BODY,
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        # ServerErrorMiddleware re-raises after this response, so the server logs it.
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_INTERNAL_ERROR_BODY,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
