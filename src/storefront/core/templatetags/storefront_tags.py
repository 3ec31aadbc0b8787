"""Template helpers for prices and cart line items."""

from decimal import Decimal, InvalidOperation

from django import template

from storefront.core import conf

register = template.Library()


@register.filter
def money(value):
    """Format an amount with the store currency symbol, e.g. ``€ 12.50``."""
    if value in (None, ""):
        return ""
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return value
    return f"{conf.get_setting('CURRENCY_SYMBOL')} {amount:.2f}"


@register.filter
def multiply(value, arg):
    try:
        return Decimal(str(value)) * Decimal(str(arg))
    except InvalidOperation:
        return ""
