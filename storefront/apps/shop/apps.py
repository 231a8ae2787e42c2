from django.apps import AppConfig


class ShopConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "storefront.apps.shop"
    verbose_name = "Shop"
