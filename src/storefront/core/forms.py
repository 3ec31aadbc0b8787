"""Forms for the custom user model."""

from django.contrib.auth.forms import UserChangeForm, UserCreationForm

from .models import User


class StoreUserCreationForm(UserCreationForm):
    class Meta:
        model = User
        fields = ("email", "role")


class StoreUserChangeForm(UserChangeForm):
    class Meta:
        model = User
        fields = ("email", "first_name", "last_name", "role")
