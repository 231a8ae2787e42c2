"""Back-office service settings.

The back-office process is the only one that knows the admin directory;
its presence is what marks code as running in the back-office context.
"""

from decouple import config

from .base import *  # noqa
from .base import APP_LOG_LEVEL, LOGGING, REPO_ROOT

SHOP_ADMIN_DIR = config("SHOP_ADMIN_DIR", default=str(REPO_ROOT / "admin"))

LOGGING["loggers"]["storefront"]["level"] = config(  # type: ignore[index]
    "BACKOFFICE_LOG_LEVEL",
    default=APP_LOG_LEVEL,
).upper()
