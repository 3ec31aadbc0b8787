"""Cart and checkout URL patterns."""

from django.urls import path

from . import views

app_name = "store"

urlpatterns = [
    path("", views.CartDetailView.as_view(), name="cart"),
    path("add/", views.CartAddView.as_view(), name="cart-add"),
    path("update/", views.CartUpdateView.as_view(), name="cart-update"),
    path("remove/", views.CartRemoveView.as_view(), name="cart-remove"),
    path("clear/", views.CartClearView.as_view(), name="cart-clear"),
    path("summary/", views.cart_summary, name="cart-summary"),
    path("checkout/", views.CheckoutView.as_view(), name="checkout"),
    path(
        "checkout/complete/<str:order_number>/",
        views.CheckoutCompleteView.as_view(),
        name="checkout-complete",
    ),
]
