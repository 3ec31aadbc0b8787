"""Session shopping cart.

Line items are plain dicts so they survive the JSON session serializer:

    {"id": 12, "name": "Hoodie", "price": "49.95", "image_url": "...",
     "quantity": 2, "color": "black", "size": "M"}

A line is identified by (product id, color, size). The same product in
another color or size is a separate line.
"""

import logging
import time
from decimal import Decimal, InvalidOperation

from storefront.core import conf

from .exceptions import InvalidQuantityError

logger = logging.getLogger(__name__)

LAST_ADD_SUFFIX = "-last-add"


def _variant(value):
    return value or None


def line_key(product_id, color=None, size=None):
    return (str(product_id), _variant(color), _variant(size))


def _parse_quantity(quantity):
    try:
        quantity = int(quantity)
    except (TypeError, ValueError):
        raise InvalidQuantityError(f"Invalid quantity: {quantity!r}")
    return quantity


class Cart:
    """Shopping cart stored in the Django session.

    Usage:
        cart = Cart(request.session)
        cart.add(product, quantity=2, color="black", size="M")
        cart.update_quantity(product.pk, 3, color="black", size="M")
        cart.total_price
    """

    def __init__(self, session, clock=time.time):
        self.session = session
        self.clock = clock
        self.session_key = conf.get_setting("CART_SESSION_KEY")
        self.items = self._load()

    def _load(self):
        raw = self.session.get(self.session_key)
        if not raw:
            return []
        try:
            items = [self._validate_line(line) for line in raw]
        except (TypeError, KeyError, ValueError, InvalidOperation) as e:
            logger.error("Error loading cart from session: %s", e)
            self.session[self.session_key] = []
            return []
        return items

    @staticmethod
    def _validate_line(line):
        quantity = int(line["quantity"])
        if quantity <= 0:
            raise ValueError(f"non-positive quantity in cart line {line!r}")
        return {
            "id": line["id"],
            "name": str(line["name"]),
            "price": str(Decimal(str(line["price"]))),
            "image_url": line.get("image_url") or "",
            "quantity": quantity,
            "color": _variant(line.get("color")),
            "size": _variant(line.get("size")),
        }

    def save(self):
        self.session[self.session_key] = self.items
        self.session.modified = True

    def _find(self, product_id, color=None, size=None):
        key = line_key(product_id, color, size)
        for index, line in enumerate(self.items):
            if line_key(line["id"], line["color"], line["size"]) == key:
                return index
        return -1

    def _is_duplicate_add(self, key, quantity):
        """True when this add repeats the last applied add within the dedup window."""
        last = self.session.get(self.session_key + LAST_ADD_SUFFIX)
        if not last or last.get("key") != [*key, quantity]:
            return False
        return 0 <= self.clock() - last.get("at", 0) < conf.get_cart_dedup_window()

    def _record_add(self, key, quantity):
        self.session[self.session_key + LAST_ADD_SUFFIX] = {"key": [*key, quantity], "at": self.clock()}

    def add(self, product, quantity=1, color=None, size=None):
        """Add a product, merging with an existing line of the same variant.

        Returns:
            True when the cart changed, False when the add was dropped as a
            rapid repeat of the previous identical add.

        Raises:
            InvalidQuantityError: If quantity is not a positive integer
        """
        quantity = _parse_quantity(1 if quantity in (None, "") else quantity)
        if quantity <= 0:
            raise InvalidQuantityError("Quantity must be at least 1")

        color, size = _variant(color), _variant(size)
        if self._is_duplicate_add(line_key(product.pk, color, size), quantity):
            logger.debug("Ignoring repeated add of product %s", product.pk)
            return False

        index = self._find(product.pk, color, size)
        if index > -1:
            self.items[index]["quantity"] += quantity
        else:
            self.items.append({
                "id": product.pk,
                "name": product.name,
                "price": str(product.price),
                "image_url": getattr(product, "image_url", "") or "",
                "quantity": quantity,
                "color": color,
                "size": size,
            })
        self._record_add(line_key(product.pk, color, size), quantity)
        self.save()
        return True

    def remove(self, product_id, color=None, size=None):
        """Remove the line matching product, color and size."""
        key = line_key(product_id, color, size)
        self.items = [
            line for line in self.items
            if line_key(line["id"], line["color"], line["size"]) != key
        ]
        self.save()

    def update_quantity(self, product_id, quantity, color=None, size=None):
        """Set a line's quantity; zero or less removes the line."""
        quantity = _parse_quantity(quantity)
        if quantity <= 0:
            self.remove(product_id, color, size)
            return

        index = self._find(product_id, color, size)
        if index > -1:
            self.items[index]["quantity"] = quantity
            self.save()

    def clear(self):
        self.items = []
        self.session.pop(self.session_key + LAST_ADD_SUFFIX, None)
        self.save()

    @property
    def total_items(self):
        return sum(line["quantity"] for line in self.items)

    @property
    def total_price(self):
        return sum(
            (Decimal(line["price"]) * line["quantity"] for line in self.items),
            Decimal("0"),
        )

    @property
    def is_empty(self):
        return not self.items

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        for line in self.items:
            price = Decimal(line["price"])
            yield {**line, "price": price, "line_total": price * line["quantity"]}

    def as_dict(self):
        """JSON friendly snapshot for the cart drawer."""
        return {
            "items": [
                {**line, "line_total": str(Decimal(line["price"]) * line["quantity"])}
                for line in self.items
            ],
            "total_items": self.total_items,
            "total_price": str(self.total_price),
        }
