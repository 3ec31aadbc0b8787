"""Admin dashboard URL patterns, mounted under /staff/."""

from django.urls import path

from . import views

app_name = "dashboard"

urlpatterns = [
    path("", views.DashboardView.as_view(), name="home"),
    path("analytics/", views.AnalyticsView.as_view(), name="analytics"),
    path("analytics/data/", views.AnalyticsDataView.as_view(), name="analytics-data"),

    # Products
    path("products/", views.ProductListView.as_view(), name="product-list"),
    path("products/new/", views.ProductCreateView.as_view(), name="product-create"),
    path("products/<int:pk>/edit/", views.ProductUpdateView.as_view(), name="product-edit"),
    path("products/<int:pk>/offer/", views.ProductTemporaryOfferView.as_view(), name="product-offer"),
    path("products/<int:pk>/delete/", views.ProductDeleteView.as_view(), name="product-delete"),

    # Categories
    path("categories/", views.CategoryListView.as_view(), name="category-list"),

    # Collections
    path("collections/", views.CollectionListView.as_view(), name="collection-list"),
    path("collections/new/", views.CollectionCreateView.as_view(), name="collection-create"),
    path("collections/<int:pk>/edit/", views.CollectionUpdateView.as_view(), name="collection-edit"),
    path("collections/<int:pk>/delete/", views.CollectionDeleteView.as_view(), name="collection-delete"),

    # Orders
    path("orders/", views.OrderListView.as_view(), name="order-list"),
    path("orders/<int:pk>/", views.OrderDetailView.as_view(), name="order-detail"),

    # Customers
    path("customers/", views.CustomerListView.as_view(), name="customer-list"),
    path("customers/<uuid:pk>/", views.CustomerDetailView.as_view(), name="customer-detail"),
    path("customers/<uuid:pk>/delete/", views.CustomerDeleteView.as_view(), name="customer-delete"),

    # Users
    path("users/", views.UserListView.as_view(), name="user-list"),
    path("users/<uuid:pk>/edit/", views.UserUpdateView.as_view(), name="user-edit"),
    path("users/<uuid:pk>/delete/", views.UserDeleteView.as_view(), name="user-delete"),

    path("settings/", views.SettingsView.as_view(), name="settings"),
]
