from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.platform.logger import get_logger
from app.platform.response import error_response

logger = get_logger("exceptions")


class ScanError(Exception):
    """Base for every failure that is reported to the caller as a single error."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Something went wrong on our end. Please try again."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ScanError):
    """Missing or malformed URL; the user has to correct the input."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Please enter a valid website URL (e.g., example.com)"


class UnreachableError(ScanError):
    """DNS lookup failed or the connection was refused."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "We couldn't reach that website. Check the URL and try again."


class RequestTimeoutError(ScanError):
    status_code = status.HTTP_408_REQUEST_TIMEOUT
    message = "The website took too long to respond. Please try again."


class BlockedError(ScanError):
    """The target site answered 403."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "This site blocks automated scanning. Try a different URL."


class UnclassifiedError(ScanError):
    pass


def add_exception_handlers(app):
    @app.exception_handler(ScanError)
    async def scan_exception_handler(request: Request, exc: ScanError):
        if isinstance(exc, UnclassifiedError):
            logger.error(f"Unclassified scan failure: {exc.__cause__ or exc}", exc_info=exc.__cause__ or exc)
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(str(exc.detail) or "Error", exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return error_response("Invalid request body", status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return error_response(UnclassifiedError.message, status.HTTP_500_INTERNAL_SERVER_ERROR)
