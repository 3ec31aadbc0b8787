from django.apps import AppConfig


class DashboardConfig(AppConfig):
    name = "storefront.dashboard"
    label = "dashboard"
    verbose_name = "Admin Dashboard"
    default_auto_field = "django.db.models.BigAutoField"
