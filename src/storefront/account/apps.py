from django.apps import AppConfig


class AccountConfig(AppConfig):
    name = "storefront.account"
    label = "account"
    verbose_name = "Customer Account"
    default_auto_field = "django.db.models.BigAutoField"
