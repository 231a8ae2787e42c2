"""Custom middleware helpers."""

from __future__ import annotations

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from storefront.apps.core.ip import client_log_fields
from storefront.apps.shop.url_helper import RequestUrlHelper
from storefront.logging import bind_log_context, reset_log_context


class RequestContextMiddleware:
    """Attach request ID, host, client and UTM attribution to log records.

    The request's ``RequestUrlHelper`` is exposed as ``request.url_helper``
    so views and templates don't rebuild it.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.META.get("HTTP_X_REQUEST_ID") or uuid.uuid4().hex

        user_id = None
        username = None
        if getattr(request, "user", None) and getattr(request.user, "is_authenticated", False):
            user_id = getattr(request.user, "id", None)
            username = getattr(request.user, "username", None)

        helper = RequestUrlHelper.for_request(request)
        request.url_helper = helper  # type: ignore[attr-defined]

        token = bind_log_context(
            request_id=request_id,
            path=request.path,
            method=request.method,
            user_id=user_id,
            username=username,
            **client_log_fields(request),
            host=helper.resolve_host(),
            **helper.get_utm_labels(),
        )
        request.request_id = request_id  # type: ignore[attr-defined]
        try:
            response = self.get_response(request)
        finally:
            reset_log_context(token)

        response.headers.setdefault("X-Request-ID", request_id)
        return response
