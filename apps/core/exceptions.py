import logging

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def flatten_errors(detail, prefix=''):
    """
    Turns DRF's nested error detail into a flat list of
    {"field", "message", "code"} entries. Nested keys are joined with dots.
    """
    errors = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            errors.extend(flatten_errors(value, field))
    elif isinstance(detail, list):
        for index, item in enumerate(detail):
            if isinstance(item, (dict, list)):
                errors.extend(flatten_errors(item, f"{prefix}.{index}" if prefix else str(index)))
            else:
                errors.extend(flatten_errors(item, prefix))
    else:
        errors.append({
            'field': prefix or 'non_field_errors',
            'message': str(detail),
            'code': getattr(detail, 'code', 'invalid'),
        })
    return errors


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            f"[API] Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc
        )
        return Response(
            {'message': f"Internal server error: {exc}"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        response.data = {
            'message': 'Invalid data',
            'errors': flatten_errors(exc.detail),
        }
    elif isinstance(exc, NotAuthenticated):
        response.data = {'message': 'Unauthorized'}
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'message': str(response.data['detail'])}

    return response
