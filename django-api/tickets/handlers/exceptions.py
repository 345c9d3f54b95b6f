"""DRF exception handler mapping errors to a single response envelope.

Every error body looks like ``{"error": {"code": ..., "message": ...}}``.
Internal details are never exposed.
"""

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from tickets.domain.errors import DomainError

logger = logging.getLogger(__name__)


def error_body(code: str, message: str, details=None) -> dict:
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}


def tickets_exception_handler(exc, context) -> Response:
    if isinstance(exc, DomainError):
        return Response(
            error_body(exc.code.value, exc.message),
            status=status.HTTP_400_BAD_REQUEST,
        )

    # Django errors carry no code; use their DRF counterparts
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, exceptions.ValidationError):
            response.data = error_body("VALIDATION_ERROR", "Invalid request body.", response.data)
        else:
            response.data = error_body(exc.default_code.upper(), str(exc.detail))
        return response

    logger.exception("Unhandled exception in %s", type(context.get("view")).__name__)
    return Response(
        error_body("INTERNAL_ERROR", "An unexpected error occurred. Please try again later."),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
