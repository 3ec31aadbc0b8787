"""URL configuration for the Storefront project."""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from storefront.account.urls import auth_urlpatterns
from storefront.core.views import health_check

handler404 = "storefront.core.views.page_not_found"

urlpatterns = [
    # Health check
    path("health/", health_check, name="health_check"),

    # Django admin
    path("admin/", admin.site.urls),

    # Authentication
    path("accounts/", include((auth_urlpatterns, "accounts"), namespace="accounts")),

    # Customer account
    path("account/", include("storefront.account.urls", namespace="account")),

    # Admin dashboard
    path("staff/", include("storefront.dashboard.urls", namespace="dashboard")),

    # Cart and checkout
    path("cart/", include("storefront.store.urls", namespace="store")),

    # Storefront pages
    path("", include("storefront.catalog.urls", namespace="catalog")),
]

# Serve media files in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
