"""Tests for the user model, auth backend, site settings and template helpers."""

from decimal import Decimal

import pytest
from django.contrib.auth import authenticate, get_user_model
from django.test import RequestFactory

from storefront.core import conf
from storefront.core.context_processors import storefront_context
from storefront.core.models import SiteSettings
from storefront.core.templatetags.storefront_tags import money, multiply

User = get_user_model()


@pytest.mark.django_db
class TestUserModel:
    def test_create_user_normalizes_email(self):
        user = User.objects.create_user(email="Mixed@Example.COM", password="secret1")

        assert user.email == "mixed@example.com"
        assert user.role == User.Role.CUSTOMER
        assert not user.is_admin

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email="", password="secret1")

    def test_create_superuser_is_admin(self):
        user = User.objects.create_superuser(email="root@example.com", password="secret1")

        assert user.role == User.Role.ADMIN
        assert user.is_admin

    def test_display_name(self, customer):
        assert customer.get_display_name() == "Carla Customer"
        assert User(email="solo@example.com").get_display_name() == "solo"

    def test_customers_manager(self, customer, admin_user):
        assert list(User.objects.customers()) == [customer]


@pytest.mark.django_db
class TestEmailBackend:
    def test_authenticate_by_email(self, customer):
        assert authenticate(username="CUSTOMER@example.com", password="testpass123") == customer

    def test_wrong_password(self, customer):
        assert authenticate(username="customer@example.com", password="nope") is None

    def test_unknown_email(self, db):
        assert authenticate(username="ghost@example.com", password="testpass123") is None


@pytest.mark.django_db
class TestSiteSettings:
    def test_load_creates_single_row(self):
        first = SiteSettings.load()
        second = SiteSettings.load()

        assert first.pk == second.pk == 1
        assert first.website_name == "Storefront"

    def test_save_always_uses_same_row(self):
        SiteSettings(website_name="Other").save()

        assert SiteSettings.objects.count() == 1
        assert SiteSettings.load().website_name == "Other"

    def test_delete_is_ignored(self):
        settings_row = SiteSettings.load()

        settings_row.delete()

        assert SiteSettings.objects.exists()


class TestConf:
    def test_defaults_merge_with_settings(self, settings):
        settings.STOREFRONT = {"SITE_NAME": "Noord"}

        assert conf.get_site_name() == "Noord"
        assert conf.get_setting("ORDER_NUMBER_PREFIX") == "ORD"
        assert conf.get_decimal("TAX_RATE") == Decimal("0.21")
        assert conf.get_cart_dedup_window() == 0.5


class TestTemplateFilters:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("12.5"), "€ 12.50"),
            ("3", "€ 3.00"),
            (0, "€ 0.00"),
            (None, ""),
            ("", ""),
            ("n/a", "n/a"),
        ],
    )
    def test_money(self, value, expected):
        assert money(value) == expected

    def test_multiply(self):
        assert multiply("2.50", 3) == Decimal("7.50")
        assert multiply("x", 3) == ""


@pytest.mark.django_db
class TestStorefrontContext:
    def test_public_area(self):
        request = RequestFactory().get("/products/")

        context = storefront_context(request)["storefront"]

        assert context["is_staff_area"] is False
        assert context["site_settings"].pk == 1
        products = [item for item in context["navigation"] if item["label"] == "Products"][0]
        assert products["resolved_url"] == "/products/"
        assert products["is_active"] is True

    def test_staff_area(self):
        request = RequestFactory().get("/staff/orders/")

        context = storefront_context(request)["storefront"]

        assert context["is_staff_area"] is True
        active = [item["label"] for item in context["navigation"] if item["is_active"]]
        assert active == ["Orders"]


@pytest.mark.django_db
class TestHealthCheck:
    def test_healthy(self, client):
        response = client.get("/health/")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "connected"}
