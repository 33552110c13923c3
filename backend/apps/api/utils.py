from collections.abc import Mapping
from typing import Any, Dict, Optional

from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PRODUCT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "BUSINESS_RULE_VIOLATION": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "TOO_MANY_REQUESTS": status.HTTP_429_TOO_MANY_REQUESTS,
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _timestamp() -> str:
    return timezone.localtime().replace(microsecond=0, tzinfo=None).isoformat()


def flatten_field_errors(errors: Any) -> Any:
    """Collapse DRF ``{"field": ["msg", ...]}`` errors to ``{"field": "msg"}``."""
    if isinstance(errors, Mapping):
        return {
            str(key): flatten_field_errors(value) for key, value in errors.items()
        }
    if isinstance(errors, (list, tuple)):
        if errors and all(isinstance(item, str) for item in errors):
            return str(errors[0])
        return [flatten_field_errors(item) for item in errors]
    return errors


def _normalize_details(details: Any) -> Any:
    if isinstance(details, ValidationError):
        return flatten_field_errors(as_serializer_error(details))
    if isinstance(details, Mapping):
        return flatten_field_errors(details)
    if isinstance(details, Exception):
        return {"type": details.__class__.__name__}
    return details


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    hint: Optional[str] = None,
    extra: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Return the standard error envelope.

    Shape::

        {"success": false, "message": ..., "timestamp": ..., "statusCode": ...,
         "data": {"errorCode": ..., "message": ..., "details": {...},
                  "timestamp": ...}}

    Args:
        code: Machine-readable error identifier, stored as ``data.errorCode``.
        message: Human-readable explanation of the error.
        details: Optional context, e.g. a field -> message mapping.
        http_status: Explicit HTTP status code to override the default mapping.
        hint: Optional actionable message for clients on how to resolve the error.
        extra: Optional mapping holding additional machine-readable fields.
        headers: Optional response headers to include alongside the payload.
    """

    if not isinstance(code, str):
        raise TypeError("error_response requires code to be a string")
    if not isinstance(message, str):
        raise TypeError("error_response requires message to be a string")

    code = code.strip()
    message = message.strip()

    if not code:
        raise ValueError("error_response requires a non-empty code")
    if not message:
        raise ValueError("error_response requires a non-empty message")

    normalized_code = code.upper()

    status_code = (
        int(http_status)
        if http_status is not None
        else ERROR_STATUS_MAP.get(normalized_code, DEFAULT_ERROR_STATUS)
    )

    if extra is not None and not isinstance(extra, Mapping):
        raise TypeError("error_response extra must be a mapping if provided")
    if headers is not None and not isinstance(headers, Mapping):
        raise TypeError("error_response headers must be a mapping if provided")
    if hint is not None and not isinstance(hint, str):
        raise TypeError("error_response hint must be a string if provided")

    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")

    timestamp = _timestamp()
    data: Dict[str, Any] = {
        "errorCode": normalized_code,
        "message": message,
        "timestamp": timestamp,
    }
    if details is not None:
        data["details"] = _normalize_details(details)
    if hint is not None:
        data["hint"] = hint
    if extra:
        data["extra"] = dict(extra)

    payload: Dict[str, Any] = {
        "success": False,
        "message": message,
        "timestamp": timestamp,
        "statusCode": status_code,
        "data": data,
    }

    headers_dict = (
        {str(key): str(value) for key, value in headers.items()} if headers else None
    )

    return Response(payload, status=status_code, headers=headers_dict)


def success_response(
    data: Any = None,
    message: str = "Operación exitosa",
    http_status: int = status.HTTP_200_OK,
) -> Response:
    """Return the success counterpart of the error envelope."""
    payload = {
        "success": True,
        "message": message,
        "timestamp": _timestamp(),
        "statusCode": int(http_status),
        "data": data,
    }
    return Response(payload, status=http_status)
