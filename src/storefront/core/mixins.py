"""
View mixins for access control.

- CustomerAreaMixin: authenticated users (customers and admins)
- AdminRequiredMixin: users with the admin role
"""
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied


class CustomerAreaMixin(LoginRequiredMixin):
    """Authenticated customer access for the account pages."""

    login_url = "/accounts/login/"
    redirect_field_name = "next"


class AdminRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """Admin dashboard access.

    Anonymous users are sent to the login page, authenticated users
    without the admin role get a 403.
    """

    login_url = "/accounts/login/"
    raise_exception = True

    def test_func(self):
        user = self.request.user
        return user.is_authenticated and user.is_admin

    def handle_no_permission(self):
        if self.request.user.is_authenticated:
            raise PermissionDenied("You don't have permission to access this page.")
        return redirect_to_login(
            self.request.get_full_path(),
            self.get_login_url(),
            self.get_redirect_field_name(),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["is_staff_area"] = True
        return context
