import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from orders import errors
from routing import DistanceResolutionError

logger = logging.getLogger(__name__)

# Most specific first: TransitionTimeout is a PersistenceError
_STATUS_FOR_ERROR = [
    (errors.ValidationError, status.HTTP_400_BAD_REQUEST),
    (errors.OrderNotFound, status.HTTP_404_NOT_FOUND),
    (errors.TransitionConflict, status.HTTP_409_CONFLICT),
    (errors.TransitionTimeout, status.HTTP_503_SERVICE_UNAVAILABLE),
    (errors.PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (DistanceResolutionError, status.HTTP_502_BAD_GATEWAY),
]


def _flatten(detail):
    """Collapse DRF's nested error detail into one readable line."""
    if isinstance(detail, dict):
        if set(detail) == {"detail"}:
            return _flatten(detail["detail"])
        parts = []
        for field, value in detail.items():
            message = _flatten(value)
            parts.append(message if field in ("non_field_errors", "detail") else f"{field}: {message}")
        return "; ".join(parts)
    if isinstance(detail, (list, tuple)):
        return "; ".join(_flatten(item) for item in detail)
    return str(detail)


def api_exception_handler(exc, context):
    """
    Every error leaves the API as {"error": "<message>"}.
    Order errors map onto their HTTP status; everything else goes through DRF first.
    """
    for error_class, code in _STATUS_FOR_ERROR:
        if isinstance(exc, error_class):
            if code >= 500:
                logger.error("request failed: %s", exc, exc_info=exc)
            response = Response({"error": str(exc)}, status=code)
            if isinstance(exc, errors.TransitionTimeout):
                response["Retry-After"] = "1"
            return response

    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"error": _flatten(response.data)}
    return response
