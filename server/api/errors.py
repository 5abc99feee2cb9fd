# server/api/errors.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import PostboardError, AuthError, StoreError


logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(PostboardError)
    async def postboard_error_handler(request: Request, exc: PostboardError):
        if isinstance(exc, StoreError):
            logger.error("Store error on %s: %s", request.url.path, exc, exc_info=exc)

        headers = None
        if isinstance(exc, AuthError) and exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}

        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Invalid request body",
                "errors": [
                    {"field": ".".join(str(loc) for loc in e["loc"]), "message": e["msg"]}
                    for e in exc.errors()
                ],
            },
        )
