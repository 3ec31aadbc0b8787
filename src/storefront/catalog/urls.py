"""Storefront URL patterns."""

from django.urls import path

from . import views

app_name = "catalog"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),
    path("products/", views.ProductListView.as_view(), name="product-list"),
    path("products/<slug:slug>/", views.ProductDetailView.as_view(), name="product-detail"),
    path("category/<slug:slug>/", views.CategoryView.as_view(), name="category"),
    path("collections/<slug:slug>/", views.CollectionDetailView.as_view(), name="collection"),
    path("search/", views.product_search, name="search"),
]
