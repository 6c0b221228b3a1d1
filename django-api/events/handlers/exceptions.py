"""Maps domain errors to HTTP responses.

Registered as the REST framework ``EXCEPTION_HANDLER``. Anything that is not
a DomainError goes to the framework's default handler, so store failures
propagate as server errors.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    # Client input
    ErrorCode.MISSING_PATH_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_BODY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_PARAMETERS: status.HTTP_400_BAD_REQUEST,
    # Coercion of query parameters and the id filter
    ErrorCode.INVALID_PAGINATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INVALID_ID_FILTER: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INVALID_SCHEDULE_TYPE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    # Store outcomes
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_MODIFIED: status.HTTP_304_NOT_MODIFIED,
    ErrorCode.NOT_IMPLEMENTED: status.HTTP_501_NOT_IMPLEMENTED,
}

EMPTY_BODY_CODES = {ErrorCode.EVENT_NOT_FOUND, ErrorCode.EVENT_NOT_MODIFIED}


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    status_code = ERROR_STATUS[exc.code]
    logger.info("%s -> %s", exc, status_code)
    if exc.code in EMPTY_BODY_CODES:
        return Response(status=status_code)
    return Response({"message": exc.message}, status=status_code)
