"""Checkout service."""

import logging

from storefront.orders import services as order_services

from .exceptions import EmptyCartError

logger = logging.getLogger(__name__)


def place_order(cart, customer, user=None):
    """Turn the cart into an order and empty it.

    Args:
        cart: The session Cart
        customer: Cleaned CheckoutForm data
        user: Logged in user, or None for guest checkout

    Returns:
        The created Order (payment pending)

    Raises:
        EmptyCartError: If the cart has no lines
    """
    if cart.is_empty:
        raise EmptyCartError()

    items = [
        {
            "product_id": line["id"],
            "name": line["name"],
            "price": line["price"],
            "quantity": line["quantity"],
            "color": line["color"],
            "size": line["size"],
        }
        for line in cart
    ]

    order = order_services.create_order(
        items=items,
        user=user if user is not None and user.is_authenticated else None,
        email=customer["email"],
        first_name=customer["first_name"],
        last_name=customer["last_name"],
        phone=customer.get("phone", ""),
        address=customer.get("address", ""),
        postal_code=customer.get("postal_code", ""),
        city=customer.get("city", ""),
        country=customer.get("country", ""),
        payment_method=customer.get("payment_method", ""),
        notes=customer.get("notes", ""),
    )
    cart.clear()
    logger.info("Checkout complete for order %s", order.order_number)
    return order
