from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.services.llm.errors import AuthenticationError, ProviderRuntimeError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ProviderRuntimeError)
    async def handle_provider_error(
        request: Request,
        exc: ProviderRuntimeError,
    ) -> JSONResponse:
        if isinstance(exc, AuthenticationError):
            logger.info("GitHub token rejected on %s", request.url.path)
        else:
            logger.warning("%s on %s: %s", exc.error_type, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.to_error()},
        )
