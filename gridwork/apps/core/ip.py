"""Client IP address utilities."""

from __future__ import annotations

from django.http import HttpRequest
from ipware import get_client_ip


def get_real_ip(request: HttpRequest) -> str | None:
    """
    Extract the client IP address from a request.

    Uses django-ipware so requests arriving through a reverse proxy report the
    originating address from X-Forwarded-For rather than the proxy's.

    Returns None if the IP cannot be determined.
    """
    ip, _ = get_client_ip(request)
    return ip
