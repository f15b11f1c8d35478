import logging

from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class InvalidInput(ValidationError):
    """Payload failed the presence/type checks of an input serializer."""

    def __init__(self, message, fields=None):
        super().__init__(fields or {})
        self.message = message
        self.fields = fields or {}


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        request = context.get('request')
        logger.error(
            'Unhandled error on %s %s',
            getattr(request, 'method', '-'), getattr(request, 'path', '-'),
            exc_info=exc,
        )
        return Response({'status': 500, 'error': 'An unexpected error occurred.'}, status=500)
    if isinstance(exc, InvalidInput):
        return Response({'status': 400, 'error': exc.message, 'fields': exc.fields}, status=400)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    if resp.status_code == 404:
        return Response({'status': 404, 'message': str(detail)}, status=404)
    if resp.status_code == 400 and not isinstance(detail, str):
        return Response({'status': 400, 'error': 'Invalid input.', 'fields': detail}, status=400)
    headers = {k: v for k, v in resp.items() if k == 'Retry-After'}
    return Response({'status': resp.status_code, 'error': detail}, status=resp.status_code, headers=headers)
