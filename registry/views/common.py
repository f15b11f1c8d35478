"""Helpers shared by the entity views."""
from __future__ import annotations

from django.conf import settings
from rest_framework.exceptions import NotFound
from rest_framework.response import Response


def envelope(code: int, message: str, key: str, payload) -> Response:
    """Build the ``{status, message, <key>}`` response body."""
    return Response({'status': code, 'message': message, key: payload}, status=code)


def require(entity, message: str):
    """Return ``entity`` or raise a 404 carrying ``message``."""
    if entity is None:
        raise NotFound(message)
    return entity


def _lenient_int(raw, default: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def page_params(request) -> tuple[int, int]:
    """Read ``page``/``limit`` query params, falling back to defaults on bad input."""
    page = _lenient_int(request.query_params.get('page'), 1)
    limit = _lenient_int(request.query_params.get('limit'), settings.PAGINATION_DEFAULT_LIMIT)
    return page, min(limit, settings.PAGINATION_MAX_LIMIT)
