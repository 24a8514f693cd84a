"""
Error Mapping
=============

Maps domain errors and request validation failures onto HTTP responses:

- NotFoundError   -> 404
- ConflictError   -> 409
- ValidationError -> 400 (also pydantic request validation)
"""
import logging

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from salesapp.domain.exceptions import ConflictError, DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    # Any other business rule violation
    DomainError: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error into the HTTPException a controller raises."""
    status_code = next(
        code for error_type, code in _STATUS_BY_ERROR.items() if isinstance(error, error_type)
    )
    return HTTPException(status_code=status_code, detail=error.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests as 400 instead of FastAPI's default 422."""
    logger.debug("Invalid request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )
