"""Order service layer.

Order creation, status changes and the money arithmetic behind order
totals. Views and the checkout call these functions instead of touching
the models directly.
"""

import logging
import secrets
from decimal import ROUND_HALF_EVEN, Decimal
from typing import NamedTuple

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from storefront.catalog.models import Product
from storefront.core import conf

from .exceptions import InvalidStatusError
from .models import Order, OrderItem

logger = logging.getLogger(__name__)


class OrderTotals(NamedTuple):
    """Result of an order totals calculation."""

    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    total_amount: Decimal


def round_money(amount: Decimal, places: int = 2) -> Decimal:
    """Round to specified decimal places using banker's rounding."""
    quantize_str = "0." + "0" * places
    return amount.quantize(Decimal(quantize_str), rounding=ROUND_HALF_EVEN)


def calculate_totals(subtotal: Decimal) -> OrderTotals:
    """Calculate tax, shipping and total for a cart subtotal.

    Prices include VAT, so ``tax_amount`` is the VAT share of the subtotal
    and does not add to the total. Shipping is a flat fee that is waived
    from the free shipping threshold upwards (and for empty orders).

    Args:
        subtotal: Sum of line totals

    Returns:
        OrderTotals with every amount rounded to cents
    """
    subtotal = Decimal(str(subtotal))
    tax_rate = conf.get_decimal("TAX_RATE")
    threshold = conf.get_decimal("FREE_SHIPPING_THRESHOLD")

    tax_amount = subtotal * tax_rate / (Decimal("1") + tax_rate)
    if subtotal <= 0 or subtotal >= threshold:
        shipping = Decimal("0")
    else:
        shipping = conf.get_decimal("SHIPPING_FEE")

    return OrderTotals(
        subtotal=round_money(subtotal),
        tax_amount=round_money(tax_amount),
        shipping_amount=round_money(shipping),
        total_amount=round_money(subtotal + shipping),
    )


def generate_order_number(now=None) -> str:
    """Return a new order number such as ``ORD-20251019-3FA9C2``."""
    now = now or timezone.now()
    prefix = conf.get_setting("ORDER_NUMBER_PREFIX")
    while True:
        number = f"{prefix}-{now:%Y%m%d}-{secrets.token_hex(3).upper()}"
        if not Order.objects.filter(order_number=number).exists():
            return number


def get_orders(user=None):
    """All orders newest first, or only those of ``user``."""
    queryset = Order.objects.select_related("user").prefetch_related("items").order_by("-created_at")
    if user is not None:
        queryset = queryset.filter(user=user)
    return queryset


def get_order_by_id(order_id):
    return get_orders().filter(pk=order_id).first()


def get_order_by_number(order_number):
    return get_orders().filter(order_number=order_number).first()


def get_customer_orders(customer):
    return get_orders(user=customer)


@transaction.atomic
def create_order(*, items, **data) -> Order:
    """Create an order with its line items.

    Args:
        items: Iterable of dicts with ``product_id``, ``name``, ``price``,
            ``quantity`` and optional ``color`` / ``size``
        **data: Order fields (email, names, address, payment_method, ...)

    Returns:
        The created Order, totals filled in from the items
    """
    items = list(items)
    subtotal = sum(
        (Decimal(str(item["price"])) * int(item["quantity"]) for item in items),
        Decimal("0"),
    )
    totals = calculate_totals(subtotal)
    data.setdefault("currency", conf.get_currency())

    order = Order.objects.create(
        order_number=generate_order_number(),
        subtotal=totals.subtotal,
        tax_amount=totals.tax_amount,
        shipping_amount=totals.shipping_amount,
        total_amount=totals.total_amount,
        **data,
    )

    products = Product.objects.in_bulk([item["product_id"] for item in items])
    for item in items:
        product = products.get(item["product_id"])
        OrderItem.objects.create(
            order=order,
            product=product,
            product_name=item["name"],
            unit_price=Decimal(str(item["price"])),
            quantity=int(item["quantity"]),
            color=item.get("color") or "",
            size=item.get("size") or "",
        )
        if product is not None:
            Product.objects.filter(pk=product.pk).update(
                sales_count=F("sales_count") + int(item["quantity"])
            )

    logger.info(
        "Created order %s for %s (%s items, total %s)",
        order.order_number,
        order.email,
        len(items),
        order.total_amount,
    )
    return order


def update_order_status(order: Order, status: str) -> bool:
    """Change the fulfilment status of an order.

    Returns:
        True when the status changed, False when it already had it

    Raises:
        InvalidStatusError: If status is not a known order status
    """
    if status not in Order.Status.values:
        raise InvalidStatusError(status, Order.Status.values)
    if order.status == status:
        return False

    old_status = order.status
    order.status = status
    order.save(update_fields=["status", "updated_at"])
    logger.info("Order %s status %s -> %s", order.order_number, old_status, status)
    return True


def update_payment_status(order: Order, payment_status: str) -> bool:
    if payment_status not in Order.PaymentStatus.values:
        raise InvalidStatusError(payment_status, Order.PaymentStatus.values)
    if order.payment_status == payment_status:
        return False

    order.payment_status = payment_status
    order.save(update_fields=["payment_status", "updated_at"])
    logger.info("Order %s payment status -> %s", order.order_number, payment_status)
    return True
