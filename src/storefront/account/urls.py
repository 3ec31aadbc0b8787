"""Authentication and customer account URL patterns."""

from django.urls import path

from . import views

app_name = "account"

# Mounted at /accounts/ under the "accounts" namespace
auth_urlpatterns = [
    path("login/", views.LoginView.as_view(), name="login"),
    path("register/", views.RegisterView.as_view(), name="register"),
    path("logout/", views.LogoutView.as_view(), name="logout"),
]

urlpatterns = [
    path("", views.AccountDashboardView.as_view(), name="dashboard"),
    path("orders/<str:order_number>/", views.AccountOrderDetailView.as_view(), name="order-detail"),
    path("edit/", views.ProfileEditView.as_view(), name="edit"),
    path("password/", views.PasswordChangeView.as_view(), name="password"),
]
