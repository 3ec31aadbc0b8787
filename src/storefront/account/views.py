"""Authentication and customer account views."""

import logging

from django.contrib import messages
from django.contrib.auth import login, logout, update_session_auth_hash
from django.contrib.auth.forms import PasswordChangeForm
from django.http import Http404
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import FormView, TemplateView

from storefront.core.mixins import CustomerAreaMixin
from storefront.orders import services as order_services

from .forms import LoginForm, ProfileForm, RegisterForm

logger = logging.getLogger(__name__)


def landing_url_for(user):
    """Admins land on the dashboard, customers on their account page."""
    if user.is_admin:
        return reverse("dashboard:home")
    return reverse("account:dashboard")


class LoginView(FormView):
    template_name = "account/login.html"
    form_class = LoginForm

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["request"] = self.request
        return kwargs

    def get_success_url(self, user):
        next_url = self.request.POST.get("next") or self.request.GET.get("next")
        if next_url and url_has_allowed_host_and_scheme(
            next_url,
            allowed_hosts={self.request.get_host()},
            require_https=self.request.is_secure(),
        ):
            return next_url
        return landing_url_for(user)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["next"] = self.request.GET.get("next", "")
        return context

    def form_valid(self, form):
        user = form.get_user()
        login(self.request, user)
        logger.info("User %s logged in", user.pk)
        return redirect(self.get_success_url(user))


class RegisterView(FormView):
    template_name = "account/register.html"
    form_class = RegisterForm

    def form_valid(self, form):
        user = form.save()
        login(self.request, user, backend="storefront.core.backends.EmailBackend")
        logger.info("Registered customer %s", user.pk)
        messages.success(self.request, "Your account has been created.")
        return redirect("account:dashboard")


class LogoutView(View):
    http_method_names = ["post"]

    def post(self, request):
        logout(request)
        return redirect("catalog:home")


class AccountDashboardView(CustomerAreaMixin, TemplateView):
    """Customer landing page with their orders."""

    template_name = "account/dashboard.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["orders"] = order_services.get_customer_orders(self.request.user)
        return context


class AccountOrderDetailView(CustomerAreaMixin, TemplateView):
    template_name = "account/order_detail.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        order = order_services.get_customer_orders(self.request.user).filter(
            order_number=self.kwargs["order_number"]
        ).first()
        if order is None:
            raise Http404("Order not found")
        context["order"] = order
        return context


class ProfileEditView(CustomerAreaMixin, FormView):
    """Edit profile information."""

    template_name = "account/profile_edit.html"
    form_class = ProfileForm

    def get_initial(self):
        user = self.request.user
        return {"first_name": user.first_name, "last_name": user.last_name}

    def form_valid(self, form):
        user = self.request.user
        user.first_name = form.cleaned_data["first_name"]
        user.last_name = form.cleaned_data["last_name"]
        user.save(update_fields=["first_name", "last_name", "updated_at"])
        messages.success(self.request, "Profile updated successfully.")
        return redirect("account:dashboard")


class PasswordChangeView(CustomerAreaMixin, FormView):
    """Change password."""

    template_name = "account/password_change.html"
    form_class = PasswordChangeForm

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["user"] = self.request.user
        return kwargs

    def form_valid(self, form):
        user = form.save()
        update_session_auth_hash(self.request, user)
        messages.success(self.request, "Password changed successfully.")
        return redirect("account:dashboard")
