"""Translation of domain errors into HTTP responses."""

from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from ....infrastructure.logging import get_logger
from ...common.constants import EXCEPTION_MAPPING
from ...common.exceptions import DomainError, RepositorySchemaError

logger = get_logger(__name__)


def map_exception(error: DomainError) -> HTTPException:
    """HTTP exception for a domain error; the most specific mapped base class wins."""
    for error_class in type(error).__mro__:
        mapper = EXCEPTION_MAPPING.get(error_class)
        if mapper is not None:
            return mapper(str(error))

    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


def register_exception_handlers(app: FastAPI) -> None:
    """Answer domain errors that escape a route with their mapped status code."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        http_exception = map_exception(exc)
        return JSONResponse(status_code=http_exception.status_code, content={"detail": http_exception.detail})


def handle_exception(error: Exception) -> Optional[HTTPException]:
    """Convert an error caught in a route handler.

    Repository schema errors are logged, since they point at a missing
    element set rather than at the request.

    Returns:
        The HTTP exception to raise, or None when the error is not a domain or HTTP error
    """
    if isinstance(error, HTTPException):
        return error
    if not isinstance(error, DomainError):
        return None

    if isinstance(error, RepositorySchemaError):
        logger.error(f"Repository schema error: {error}")
    return map_exception(error)
