"""DRF exception handler mapping domain errors to HTTP responses.

Handlers let DomainError propagate; this module turns it into a
{"code", "message"} body. Internal details are logged, never returned.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.STORE_NOT_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_CART: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.GUEST_LIMIT_REACHED: status.HTTP_403_FORBIDDEN,
    ErrorCode.CHECK_IN_IN_PROGRESS: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_SIGNUP: status.HTTP_409_CONFLICT,
    ErrorCode.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CLIP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def error_body(error: DomainError) -> dict:
    body = {"code": error.code.value, "message": error.message}
    redirect = getattr(error, "redirect", None)
    if redirect:
        body["redirect"] = redirect
    return body


def domain_exception_handler(exc: Exception, context: dict) -> Response | None:
    if isinstance(exc, DomainError):
        status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        if status_code >= 500:
            logger.warning("%s failed: %s", context.get("view").__class__.__name__, exc)
        return Response(error_body(exc), status=status_code)
    return exception_handler(exc, context)
