"""
Service error taxonomy.

Services raise these; the API layer translates them into the JSON error
body via the handlers registered in config/urls.py:

    {"statusCode": 404, "message": "Tarefa não encontrada", "error": "Not Found"}
"""
import logging
from typing import List, Union

from django.http import HttpRequest
from ninja import Schema

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code = 500
    reason = "Internal Server Error"

    def __init__(self, message: Union[str, List[str]]):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {
            "statusCode": self.status_code,
            "message": self.message,
            "error": self.reason,
        }


class ValidationError(ServiceError):
    """Malformed, missing or out-of-range input. Carries every violation."""
    status_code = 400
    reason = "Bad Request"

    def __init__(self, messages: List[str]):
        super().__init__(list(messages))
        self.messages = self.message


class NotFoundError(ServiceError):
    status_code = 404
    reason = "Not Found"


class ConflictError(ServiceError):
    status_code = 409
    reason = "Conflict"


class ErrorOut(Schema):
    """Error body, as documented in the OpenAPI schema."""
    statusCode: int
    message: str
    error: str


class ValidationErrorOut(Schema):
    statusCode: int
    message: List[str]
    error: str


INTERNAL_ERROR_MESSAGE = "Internal server error"


# =============================================================================
# Exception handlers (registered on the NinjaAPI instance)
# =============================================================================

def handle_service_error(api, request: HttpRequest, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.path} failed: {exc.message}")
    return api.create_response(request, exc.to_body(), status=exc.status_code)


def handle_request_validation_error(api, request: HttpRequest, exc):
    """
    Render django-ninja's own request validation errors (path/query input)
    in the same shape as payload validation errors.
    """
    messages = []
    for error in exc.errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("path", "query", "body"))
        text = error.get("msg", "Invalid value")
        messages.append(f"{location}: {text}" if location else text)
    return handle_service_error(api, request, ValidationError(messages))


def handle_unexpected_error(api, request: HttpRequest, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.path}: {exc}")
    body = {
        "statusCode": 500,
        "message": INTERNAL_ERROR_MESSAGE,
        "error": "Internal Server Error",
    }
    return api.create_response(request, body, status=500)


def register_exception_handlers(api) -> None:
    """Attach the error translation to a NinjaAPI instance."""
    from functools import partial
    from ninja.errors import ValidationError as NinjaValidationError

    api.add_exception_handler(ServiceError, partial(handle_service_error, api))
    api.add_exception_handler(NinjaValidationError, partial(handle_request_validation_error, api))
    api.add_exception_handler(Exception, partial(handle_unexpected_error, api))

