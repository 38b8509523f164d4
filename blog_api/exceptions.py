import logging
from contextlib import contextmanager

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class APIException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class ValidationError(APIException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class ConflictError(APIException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class AuthError(APIException):
    def __init__(self, detail: str = "Unauthorized or token expired"):
        super().__init__(status_code=401, detail=detail)


class PermissionDeniedError(APIException):
    def __init__(self, detail: str = "Forbidden: admin access only"):
        super().__init__(status_code=403, detail=detail)


class NotFoundError(APIException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class StoreError(APIException):
    """Any underlying query failure. The message never carries store detail."""

    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=detail)


@contextmanager
def store_boundary(message: str):
    """Collapse every store failure raised inside the block into one StoreError."""
    try:
        yield
    except APIException:
        raise
    except Exception as e:
        logger.error(f"{message}: {e}", exc_info=True)
        raise StoreError(message) from e


def create_error_response(error_message: str, status_code: int = 400) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }

async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    # HTTPBearer reports a missing header as 403; callers expect 401
    if exc.status_code == 403 and "Not authenticated" in str(exc.detail):
        return JSONResponse(
            status_code=401,
            content=create_error_response("Unauthorized: Token missing", 401)
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail, exc.status_code)
    )
