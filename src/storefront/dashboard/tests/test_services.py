"""Tests for customer and user management services."""

import pytest
from django.contrib.auth import get_user_model

from storefront.dashboard import services
from storefront.dashboard.exceptions import CannotDeleteSelfError, NotACustomerError

User = get_user_model()


@pytest.mark.django_db
class TestCustomers:
    def test_get_customers_excludes_admins(self, customer, other_customer, admin_user):
        customers = list(services.get_customers())

        assert set(customers) == {customer, other_customer}

    def test_search(self, customer, other_customer):
        assert list(services.get_customers("carla")) == [customer]
        assert list(services.get_customers("OTHER@")) == [other_customer]
        assert list(services.get_customers("nobody")) == []

    def test_get_customer_by_id(self, customer, admin_user):
        assert services.get_customer_by_id(customer.pk) == customer
        assert services.get_customer_by_id(admin_user.pk) is None

    def test_update_customer(self, customer):
        services.update_customer(customer, first_name="Carlijn", email="carlijn@example.com")

        customer.refresh_from_db()
        assert customer.first_name == "Carlijn"
        assert customer.email == "carlijn@example.com"
        assert customer.last_name == "Customer"

    def test_update_admin_as_customer_raises(self, admin_user):
        with pytest.raises(NotACustomerError):
            services.update_customer(admin_user, first_name="X")

    def test_delete_customer(self, customer):
        services.delete_customer(customer)

        assert not User.objects.filter(pk=customer.pk).exists()

    def test_delete_admin_as_customer_raises(self, admin_user):
        with pytest.raises(NotACustomerError):
            services.delete_customer(admin_user)

        assert User.objects.filter(pk=admin_user.pk).exists()


@pytest.mark.django_db
class TestUsers:
    def test_role_filter(self, customer, admin_user):
        assert list(services.get_users(role="admin")) == [admin_user]
        assert list(services.get_users(role="customer")) == [customer]
        assert services.get_users(role="all").count() == 2

    def test_counts(self, customer, other_customer, admin_user):
        assert services.get_user_counts() == {"total": 3, "admins": 1, "customers": 2}

    def test_promote_to_admin(self, customer):
        services.update_user(customer, role=User.Role.ADMIN)

        customer.refresh_from_db()
        assert customer.is_admin

    def test_delete_user(self, customer, admin_user):
        services.delete_user(customer, acting_user=admin_user)

        assert not User.objects.filter(pk=customer.pk).exists()

    def test_cannot_delete_self(self, admin_user):
        with pytest.raises(CannotDeleteSelfError):
            services.delete_user(admin_user, acting_user=admin_user)

        assert User.objects.filter(pk=admin_user.pk).exists()
