"""Storefront configuration."""

from decimal import Decimal

from django.conf import settings


def get_config():
    """Get storefront configuration from settings."""
    defaults = {
        # Site branding
        "SITE_NAME": "Storefront",

        # Money
        "CURRENCY": "EUR",
        "CURRENCY_SYMBOL": "€",
        "TAX_RATE": "0.21",  # prices include VAT
        "SHIPPING_FEE": "4.95",
        "FREE_SHIPPING_THRESHOLD": "50.00",

        # Cart
        "CART_SESSION_KEY": "shopping-cart",
        "CART_DEDUP_WINDOW": 0.5,  # seconds

        # Orders
        "ORDER_NUMBER_PREFIX": "ORD",

        # Storefront listings
        "HOMEPAGE_PRODUCT_LIMIT": 6,
        "SEARCH_RESULT_LIMIT": 8,

        # Navigation for each area
        "PUBLIC_NAV": [],
        "STAFF_NAV": [],

        # URL prefix of the admin dashboard
        "STAFF_PREFIX": "/staff/",
    }

    user_config = getattr(settings, "STOREFRONT", {})
    return {**defaults, **user_config}


def get_setting(name, default=None):
    """Get a specific storefront setting."""
    config = get_config()
    return config.get(name, default)


def get_decimal(name):
    """Get a money or rate setting as a Decimal."""
    return Decimal(str(get_setting(name)))


def get_site_name():
    """Get the configured site name."""
    return get_setting("SITE_NAME", "Storefront")


def get_currency():
    return get_setting("CURRENCY", "EUR")


def get_cart_dedup_window():
    return float(get_setting("CART_DEDUP_WINDOW", 0.5))
