"""Liveness probe: the default database must answer a trivial query."""
import logging

from django.db import connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def healthz(request):
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            row = cursor.fetchone()
    except Exception as exc:
        logger.warning('health check failed: %s', exc)
        return JsonResponse({'ok': False, 'error': str(exc)}, status=500)
    return JsonResponse({'ok': True, 'db': bool(row and row[0] == 1), 'vendor': connection.vendor})
