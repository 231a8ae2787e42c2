"""Client address fields for request logs."""

from __future__ import annotations

from django.http import HttpRequest
from ipware import get_client_ip


def client_log_fields(request: HttpRequest) -> dict[str, object]:
    """
    Return ``remote_ip`` and ``remote_ip_routable`` for the log context.

    django-ipware picks one address out of X-Forwarded-For and the other
    proxy headers, preferring public ones. ``RequestUrlHelper.get_client_ip``
    is the shop-facing counterpart and hands back the raw forwarded chain.
    Both fields are None when no address can be found.
    """
    ip, routable = get_client_ip(request)
    if ip is None:
        return {"remote_ip": None, "remote_ip_routable": None}
    return {"remote_ip": ip, "remote_ip_routable": routable}
