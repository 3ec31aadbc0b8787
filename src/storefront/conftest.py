"""Shared pytest fixtures for storefront tests."""

from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.contrib.sessions.backends.signed_cookies import SessionStore


User = get_user_model()

PASSWORD = "testpass123"


@pytest.fixture
def admin_user(db):
    """Create an admin user."""
    return User.objects.create_user(
        email="admin@example.com",
        password=PASSWORD,
        first_name="Ada",
        last_name="Admin",
        role=User.Role.ADMIN,
    )


@pytest.fixture
def customer(db):
    """Create a customer."""
    return User.objects.create_user(
        email="customer@example.com",
        password=PASSWORD,
        first_name="Carla",
        last_name="Customer",
    )


@pytest.fixture
def other_customer(db):
    return User.objects.create_user(
        email="other@example.com",
        password=PASSWORD,
        first_name="Otto",
        last_name="Other",
    )


@pytest.fixture
def admin_client(client, admin_user):
    """Client logged in as the admin user."""
    client.login(username=admin_user.email, password=PASSWORD)
    return client


@pytest.fixture
def customer_client(client, customer):
    """Client logged in as the customer."""
    client.login(username=customer.email, password=PASSWORD)
    return client


@pytest.fixture
def category(db):
    from storefront.catalog.models import Category

    return Category.objects.create(name="Hoodies", description="Warm hoodies")


@pytest.fixture
def make_product(db, category):
    """Factory for products with one image."""
    from storefront.catalog.models import Product, ProductImage

    def _make(name="Heavy Hoodie", price="49.95", **fields):
        fields.setdefault("category", category)
        product = Product.objects.create(name=name, price=Decimal(price), **fields)
        ProductImage.objects.create(
            product=product,
            url=f"https://cdn.example.com/{product.slug}.jpg",
            is_primary=True,
        )
        return product

    return _make


@pytest.fixture
def product(make_product):
    """Create an active product with colors and sizes."""
    return make_product(
        colors=[{"name": "Black", "color_code": "#000000"}],
        sizes=["M", "L"],
    )


@pytest.fixture
def session():
    """An unsaved session, enough for cart tests."""
    return SessionStore()
