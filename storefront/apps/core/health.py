"""Health check helpers."""

from __future__ import annotations

from django.db import connection

from storefront.apps.shop.config_store import ConfigurationStore
from storefront.apps.shop.url_helper import SHOP_DOMAIN_KEY


def check_db_and_config() -> dict:
    """Verify DB connectivity and that the configuration store can be read."""
    details: dict[str, object] = {}
    connection.ensure_connection()
    details["db"] = "ok"

    # Constance's database backend goes through the ORM
    shop_domain = ConfigurationStore().get(SHOP_DOMAIN_KEY)
    details["shop_domain"] = shop_domain if shop_domain is not None else "request"
    return details
