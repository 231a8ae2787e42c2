"""Shop addressing and back-office context."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from django.conf import settings
from django.utils.crypto import salted_hmac

from storefront.apps.shop.exceptions import PreconditionError

ADMIN_TOKEN_SALT = "storefront.apps.shop.context.admin_token"


@dataclass(frozen=True)
class ShopContext:
    """Where the shop lives, and whether we're running in the back-office.

    ``admin_dir`` is only set in the back-office process; its basename is the
    URL segment the admin panel is served under.
    """

    domain: str
    domain_ssl: str
    physical_uri: str = "/"
    ssl_enabled: bool = False
    admin_dir: str | None = None
    employee_id: int | None = None

    @classmethod
    def from_settings(cls, employee_id: int | None = None) -> ShopContext:
        return cls(
            domain=settings.SHOP_DOMAIN,
            domain_ssl=settings.SHOP_DOMAIN_SSL,
            physical_uri=settings.SHOP_PHYSICAL_URI,
            ssl_enabled=settings.SHOP_SSL_ENABLED,
            admin_dir=getattr(settings, "SHOP_ADMIN_DIR", None),
            employee_id=employee_id,
        )

    @property
    def is_back_office(self) -> bool:
        return self.admin_dir is not None

    @property
    def admin_dir_name(self) -> str:
        if self.admin_dir is None:
            raise PreconditionError("not in back-office context")
        return PurePath(self.admin_dir).name

    def get_base_url(self, use_ssl: bool = False) -> str:
        """Return protocol, domain and physical URI, always ending in a slash."""
        if use_ssl and self.ssl_enabled:
            base = f"https://{self.domain_ssl}"
        else:
            base = f"http://{self.domain}"

        uri = "/" + self.physical_uri.strip("/")
        if not uri.endswith("/"):
            uri = f"{uri}/"
        return base + uri

    def get_admin_token(self, controller: str) -> str:
        employee = "" if self.employee_id is None else str(self.employee_id)
        return salted_hmac(ADMIN_TOKEN_SALT, f"{controller}{employee}").hexdigest()[:32]

    def get_admin_link(self, controller: str) -> str:
        """Return an absolute back-office link to ``controller``, token included."""
        admin_url = self.get_base_url(True) + self.admin_dir_name + "/"
        return (
            f"{admin_url}index.php?controller={controller}"
            f"&token={self.get_admin_token(controller)}"
        )
