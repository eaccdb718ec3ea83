import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ApiError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request'


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class Conflict(ApiError):
    """Duplicate registration or a role already at capacity."""
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Authentication required'


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Forbidden'


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found'


def api_exception_handler(exc, context):
    """
    Renders every failure as {"error": "..."}.
    Anything DRF does not recognise is logged and answered with a generic 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        request = context.get('request')
        logger.exception('Unhandled error on %s %s', getattr(request, 'method', ''), getattr(request, 'path', ''))
        return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    detail = getattr(exc, 'detail', None)
    if isinstance(detail, (list, dict)):
        # serializer validation errors keep their field breakdown
        response.data = {'error': 'Invalid request data', 'fields': detail}
    else:
        response.data = {'error': str(detail) if detail is not None else response.status_text}
    return response
