from django.core.exceptions import ObjectDoesNotExist
from django.db import IntegrityError
from django.utils import timezone
import structlog
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.views import exception_handler as drf_exception_handler

from ..domain.errors import ConfigurationError, InvalidArgument

logger = structlog.get_logger()


class SchedulerInputError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid scheduling input."
    default_code = "invalid_argument"


class SchedulerConfigError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Scheduler is misconfigured."
    default_code = "configuration_error"


class DuplicateEntry(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "A record with this value already exists or references a missing record."
    default_code = "integrity_error"


class InternalError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error."
    default_code = "internal_error"


def _translate(exc):
    if isinstance(exc, InvalidArgument):
        return SchedulerInputError(str(exc))
    if isinstance(exc, ConfigurationError):
        logger.error("scheduler_misconfigured", error=str(exc))
        return SchedulerConfigError()
    if isinstance(exc, IntegrityError):
        logger.warning("integrity_error", error=str(exc))
        return DuplicateEntry()
    if isinstance(exc, ObjectDoesNotExist):
        return NotFound("Record not found")
    return exc


def exception_handler(exc, context):
    """DRF exception handler wrapping every error in a uniform envelope.

    Scheduler errors are translated first: bad input becomes a 400, a broken
    policy a 500 whose detail stays in the logs. Database errors map to
    400/404, anything DRF does not know about to a logged 500.
    """
    exc = _translate(exc)

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.error("unhandled_exception", error=repr(exc), exc_info=exc)
        exc = InternalError()
        response = drf_exception_handler(exc, context)

    request = context.get("request")
    path = request.path if request is not None else None
    detail = response.data.get("detail", response.data) if isinstance(response.data, dict) else response.data
    error = getattr(detail, "code", None) or getattr(exc, "default_code", "error")

    logger.warning("api_error",
        path=path,
        status=response.status_code,
        error=str(error),
    )

    response.data = {
        "success": False,
        "status_code": response.status_code,
        "message": detail,
        "error": error,
        "timestamp": timezone.now().isoformat(),
        "path": path,
    }
    return response
