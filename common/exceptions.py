"""
API error types and the project-wide DRF exception handler.

Every error leaves the API as ``{"message": str, "errors"?: {...}}`` so the
client can render a single shape regardless of where the failure came from.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    AuthenticationFailed,
    NotAuthenticated,
    PermissionDenied,
    Throttled,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class TenantNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "No such community."
    default_code = "tenant_not_found"


class NotAMember(PermissionDenied):
    default_detail = "You are not a member of this community."
    default_code = "not_a_member"


class InsufficientRole(PermissionDenied):
    default_detail = "Insufficient permission."
    default_code = "insufficient_role"


class LastPrivilegedMember(APIException):
    """Raised when a change would leave a tenant without an owner."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Cannot remove the last privileged administrator."
    default_code = "last_privileged_member"


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


def _flatten_errors(detail):
    if isinstance(detail, dict):
        return {
            field: [str(msg) for msg in (msgs if isinstance(msgs, list) else [msgs])]
            for field, msgs in detail.items()
        }
    if isinstance(detail, list):
        return {"non_field_errors": [str(msg) for msg in detail]}
    return {"non_field_errors": [str(detail)]}


def api_exception_handler(exc, context):
    """
    Render DRF and domain errors as ``{message, errors?}``.

    - validation errors become 422 with field-level messages
    - missing or invalid sessions become 401 (SessionAuthentication alone
      would answer 403)
    - anything DRF does not recognise is logged and answered with a
      generic 500
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled error in %s", type(view).__name__ if view else "unknown view", exc_info=exc
        )
        return Response(
            {"message": "Unexpected error."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        response.data = {"message": "Validation failed.", "errors": _flatten_errors(exc.detail)}
        return response

    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if isinstance(exc, Throttled):
        message = "Too many attempts, please wait before trying again."
    elif isinstance(response.data, dict) and "detail" in response.data:
        message = str(response.data["detail"])
    else:
        message = str(response.data)

    response.data = {"message": message}
    return response
