"""Translate domain errors into HTTP responses."""

from typing import assert_never

from rest_framework import status
from rest_framework.response import Response

from common.errors import DomainError, ErrorKind


def status_for(kind: ErrorKind) -> int:
    match kind:
        case ErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND
        case ErrorKind.PAYMENT_REQUIRED:
            return status.HTTP_402_PAYMENT_REQUIRED
        case ErrorKind.UNAUTHORIZED:
            return status.HTTP_401_UNAUTHORIZED
        case ErrorKind.INVALID:
            return status.HTTP_400_BAD_REQUEST
        case _:
            assert_never(kind)


def error_response(error: DomainError) -> Response:
    """Build the response for a domain error.

    Only the code and the message are exposed.
    """
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status_for(error.kind),
    )
