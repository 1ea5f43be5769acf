from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from config.domain_exceptions import ServiceUnavailableError, ValidationError

logger = logging.getLogger(__name__)

ERROR_BODY = "Error"


def custom_exception_handler(exc, context):
    """
    Central exception->HTTP mapping for domain/use-case exceptions.

    Event sources only distinguish success from failure, so every mapped
    failure carries the same plain-text body.
    """

    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, ServiceUnavailableError):
        logger.error("Alarm request failed: %s", exc)
        return Response(ERROR_BODY, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        return Response(str(exc) or ERROR_BODY, status=status.HTTP_400_BAD_REQUEST)

    return None
