"""URL construction and request introspection for the storefront.

``RequestUrlHelper`` is stateless: it's built once per request with its
collaborators and every method is a pure function of them.

Usage:
    helper = RequestUrlHelper.for_request(request)
    helper.get_upload_url()       # "https://shop.example/upload/"
    helper.resolve_host()         # "shop.example"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from django.http import HttpRequest

from storefront.apps.shop.config_store import ConfigurationStore
from storefront.apps.shop.context import ShopContext
from storefront.apps.shop.environment import RequestEnvironment
from storefront.apps.shop.exceptions import (
    InvalidArgumentError,
    PreconditionError,
    RequestEnvironmentError,
)
from storefront.apps.shop.utm import is_blank, utm_labels_from_request
from storefront.apps.shop.validators import is_valid_module_name

logger = logging.getLogger(__name__)

SHOP_DOMAIN_KEY = "SHOP_DOMAIN"
MODULES_CONTROLLER = "AdminModules"

# First non-empty wins
HOST_SOURCES = (
    ("header", "X-Forwarded-Host"),
    ("header", "Host"),
    ("server", "SERVER_NAME"),
    ("server", "SERVER_ADDR"),
)

_PORT_SUFFIX = re.compile(r":\d+$")
# Unescaped dot: any "www" plus one character is stripped ("www-", "wwwx")
_WWW_PREFIX = re.compile(r"^www.")

# Compat-mode HTML escaping: single quotes are left alone
_HTML_COMPAT_ESCAPES = str.maketrans({"&": "&amp;", '"': "&quot;", "<": "&lt;", ">": "&gt;"})


def escape_html_compat(value: str) -> str:
    return value.translate(_HTML_COMPAT_ESCAPES)


def strip_www(host: str) -> str:
    return _WWW_PREFIX.sub("", host, count=1)


class RequestUrlHelper:
    def __init__(
        self,
        env: RequestEnvironment,
        shop: ShopContext,
        config_store: ConfigurationStore | None = None,
        module_name_validator: Callable[[str], bool] = is_valid_module_name,
    ):
        self.env = env
        self.shop = shop
        self.config_store = config_store or ConfigurationStore()
        self.module_name_validator = module_name_validator

    @classmethod
    def for_request(cls, request: HttpRequest) -> RequestUrlHelper:
        """Build a helper wired to the default shop context and configuration store."""
        user = getattr(request, "user", None)
        employee_id = user.pk if getattr(user, "is_staff", False) else None
        return cls(
            env=RequestEnvironment.from_request(request),
            shop=ShopContext.from_settings(employee_id=employee_id),
        )

    #
    # UTM labels
    #

    def get_utm_labels(self) -> dict[str, str]:
        """Return the non-blank UTM labels of the current request."""
        return utm_labels_from_request(self.env)

    #
    # Shop URLs
    #

    def get_admin_url(self) -> str:
        """
        Return the back-office URL, with trailing slash.

        Raises:
            PreconditionError: If not running in the back-office context
        """
        if not self.shop.is_back_office:
            logger.warning("admin_url_outside_back_office")
            raise PreconditionError("not in back-office context")
        return self.shop.get_base_url(True) + self.shop.admin_dir_name + "/"

    def get_upload_url(self) -> str:
        return self.shop.get_base_url(True) + "upload/"

    def get_download_url(self) -> str:
        return self.shop.get_base_url(True) + "download/"

    def get_module_configure_url(self, module_name: str) -> str:
        """
        Return the back-office link to a module's configuration page.

        The name is appended as-is: valid module names contain nothing that
        needs URL encoding.

        Raises:
            InvalidArgumentError: If ``module_name`` is not a valid module name
            PreconditionError: If not running in the back-office context
        """
        if not self.module_name_validator(module_name):
            logger.warning("invalid_module_name", extra={"module_name": repr(module_name)})
            raise InvalidArgumentError(f"Invalid module name: {module_name!r}")
        if not self.shop.is_back_office:
            logger.warning("module_configure_url_outside_back_office")
            raise PreconditionError("not in back-office context")
        return self.shop.get_admin_link(MODULES_CONTROLLER) + "&configure=" + module_name

    #
    # Domain and host
    #

    def get_shop_domain(self, append_protocol: bool = False, escape_html: bool = False) -> str:
        """
        Return the shop's domain name.

        Uses the configured SHOP_DOMAIN and falls back to the request host.
        Escaping happens before the protocol is prepended.
        """
        domain = self.config_store.get(SHOP_DOMAIN_KEY)
        if domain is None:
            domain = self.resolve_host()
            logger.debug("shop_domain_from_request", extra={"host": domain})

        if escape_html:
            domain = escape_html_compat(domain)
        if append_protocol:
            domain = "http://" + domain
        return domain

    def resolve_host(self) -> str:
        """
        Return the current host: lower-cased, port removed.

        X-Forwarded-Host may list several hosts when requests go through
        chained proxies; the last one is the current host.
        """
        host = ""
        for kind, name in HOST_SOURCES:
            value = self.env.header(name) if kind == "header" else self.env.server(name)
            if value is None:
                continue
            host = value.strip()
            if host:
                if name == "X-Forwarded-Host":
                    host = host.split(",")[-1]
                break

        host = _PORT_SUFFIX.sub("", host)
        return host.strip().lower()

    def is_origin_host(self, host: str) -> bool:
        """Whether ``host`` is the host of the current request, ignoring a www prefix."""
        current = self.env.current_host(use_ssl=False, allow_proxy_headers=True, lowercase=False)
        return strip_www(host) == strip_www(current)

    #
    # Client
    #

    def get_client_ip(self) -> str:
        """
        Return the best-guess client IP.

        Blank headers ("" or "0") are skipped. X-Forwarded-For is returned
        verbatim, even when it holds a chain.

        Raises:
            RequestEnvironmentError: If not even REMOTE_ADDR is available
        """
        for name in ("Client-Ip", "X-Forwarded-For"):
            value = self.env.header(name)
            if not is_blank(value):
                return value

        remote_addr = self.env.server("REMOTE_ADDR")
        if remote_addr is None:
            raise RequestEnvironmentError("REMOTE_ADDR is not set")
        return remote_addr
