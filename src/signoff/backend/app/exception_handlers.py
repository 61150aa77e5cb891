import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from signoff.backend.app.domain.common.errors import DomainError, ErrorKind, StorageFailure

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.LOCKED: status.HTTP_409_CONFLICT,
    ErrorKind.GONE: status.HTTP_410_GONE,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STORAGE_FAILURE: status.HTTP_502_BAD_GATEWAY,
}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StorageFailure)
    async def storage_failure(_: Request, exc: StorageFailure):
        logger.error("Object storage failure during %s", exc.operation)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "File storage is unavailable", "kind": exc.kind},
        )

    @app.exception_handler(DomainError)
    async def domain_error(_: Request, exc: DomainError):
        return JSONResponse(
            status_code=STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST),
            content={"detail": str(exc), "kind": exc.kind},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error"
            },
        )
