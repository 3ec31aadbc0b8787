"""Tests for the session cart."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from storefront.store.cart import Cart
from storefront.store.exceptions import InvalidQuantityError


class FakeClock:
    """Clock the cart reads instead of time.time."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def hoodie():
    return SimpleNamespace(pk=1, name="Hoodie", price=Decimal("49.95"), image_url="/media/hoodie.jpg")


@pytest.fixture
def tee():
    return SimpleNamespace(pk=2, name="Tee", price=Decimal("19.99"), image_url="")


@pytest.fixture
def cart(session, clock):
    return Cart(session, clock=clock)


# =============================================================================
# Adding
# =============================================================================


class TestCartAdd:
    def test_add_creates_line(self, cart, hoodie):
        added = cart.add(hoodie, 2, color="Black", size="M")

        assert added is True
        assert len(cart) == 1
        line = cart.items[0]
        assert line["id"] == 1
        assert line["name"] == "Hoodie"
        assert line["price"] == "49.95"
        assert line["quantity"] == 2
        assert line["color"] == "Black"
        assert line["size"] == "M"

    def test_same_variant_merges_quantity(self, cart, clock, hoodie):
        """Adding the same product, color and size again increases the quantity."""
        cart.add(hoodie, 1, color="Black", size="M")
        clock.advance(2)

        cart.add(hoodie, 1, color="Black", size="M")

        assert len(cart) == 1
        assert cart.items[0]["quantity"] == 2

    def test_other_variant_is_separate_line(self, cart, hoodie):
        cart.add(hoodie, 1, color="Black", size="M")
        cart.add(hoodie, 1, color="Black", size="L")
        cart.add(hoodie, 1, color="White", size="M")

        assert len(cart) == 3
        assert cart.total_items == 3

    def test_missing_variant_matches_empty_variant(self, cart, clock, tee):
        cart.add(tee, 1)
        clock.advance(2)

        cart.add(tee, 1, color="", size="")

        assert len(cart) == 1
        assert cart.items[0]["quantity"] == 2
        assert cart.items[0]["color"] is None

    def test_default_quantity_is_one(self, cart, tee):
        cart.add(tee)

        assert cart.items[0]["quantity"] == 1

    @pytest.mark.parametrize("quantity", [0, -1, "abc"])
    def test_invalid_quantity_rejected(self, cart, tee, quantity):
        with pytest.raises(InvalidQuantityError):
            cart.add(tee, quantity)

        assert cart.is_empty


class TestCartAddDeduplication:
    """Identical adds in quick succession count once."""

    def test_repeat_within_window_ignored(self, cart, clock, hoodie):
        cart.add(hoodie, 1, color="Black", size="M")
        clock.advance(0.2)

        added = cart.add(hoodie, 1, color="Black", size="M")

        assert added is False
        assert cart.items[0]["quantity"] == 1

    def test_repeat_after_window_counts(self, cart, clock, hoodie):
        cart.add(hoodie, 1, color="Black", size="M")
        clock.advance(0.6)

        added = cart.add(hoodie, 1, color="Black", size="M")

        assert added is True
        assert cart.items[0]["quantity"] == 2

    def test_ignored_repeat_does_not_extend_window(self, cart, clock, hoodie):
        results = []
        for _ in range(4):
            results.append(cart.add(hoodie, 1, color="Black", size="M"))
            clock.advance(0.4)

        assert results == [True, False, True, False]
        assert cart.total_items == 2

    def test_different_quantity_within_window_counts(self, cart, clock, hoodie):
        cart.add(hoodie, 1, color="Black", size="M")
        clock.advance(0.1)

        cart.add(hoodie, 2, color="Black", size="M")

        assert cart.items[0]["quantity"] == 3

    def test_different_variant_within_window_counts(self, cart, clock, hoodie):
        cart.add(hoodie, 1, color="Black", size="M")
        clock.advance(0.1)

        cart.add(hoodie, 1, color="Black", size="L")

        assert len(cart) == 2

    def test_window_survives_new_cart_instance(self, session, clock, hoodie):
        """A double-submitted request builds a fresh Cart on the same session."""
        Cart(session, clock=clock).add(hoodie, 1)
        clock.advance(0.3)

        added = Cart(session, clock=clock).add(hoodie, 1)

        assert added is False
        assert Cart(session, clock=clock).total_items == 1


# =============================================================================
# Updating and removing
# =============================================================================


class TestCartUpdate:
    def test_update_quantity(self, cart, hoodie):
        cart.add(hoodie, 1, color="Black", size="M")

        cart.update_quantity(1, 4, color="Black", size="M")

        assert cart.items[0]["quantity"] == 4

    def test_update_to_zero_removes_line(self, cart, hoodie):
        cart.add(hoodie, 1, color="Black", size="M")

        cart.update_quantity(1, 0, color="Black", size="M")

        assert cart.is_empty

    def test_update_accepts_string_product_id(self, cart, hoodie):
        cart.add(hoodie, 1)

        cart.update_quantity("1", 3)

        assert cart.items[0]["quantity"] == 3

    def test_update_unknown_line_is_noop(self, cart, hoodie):
        cart.add(hoodie, 1, color="Black")

        cart.update_quantity(1, 5, color="White")

        assert cart.items[0]["quantity"] == 1

    def test_update_rejects_non_numeric(self, cart, hoodie):
        cart.add(hoodie, 1)

        with pytest.raises(InvalidQuantityError):
            cart.update_quantity(1, "many")

    def test_remove_only_matching_variant(self, cart, hoodie):
        cart.add(hoodie, 1, color="Black", size="M")
        cart.add(hoodie, 1, color="Black", size="L")

        cart.remove(1, color="Black", size="M")

        assert len(cart) == 1
        assert cart.items[0]["size"] == "L"

    def test_clear(self, cart, hoodie, tee):
        cart.add(hoodie, 1)
        cart.add(tee, 2)

        cart.clear()

        assert cart.is_empty
        assert cart.total_price == Decimal("0")


# =============================================================================
# Totals and persistence
# =============================================================================


class TestCartTotals:
    def test_totals(self, cart, hoodie, tee):
        cart.add(hoodie, 2)
        cart.add(tee, 1)

        assert cart.total_items == 3
        assert cart.total_price == Decimal("119.89")

    def test_iteration_yields_decimal_line_totals(self, cart, hoodie):
        cart.add(hoodie, 3)

        lines = list(cart)

        assert lines[0]["price"] == Decimal("49.95")
        assert lines[0]["line_total"] == Decimal("149.85")

    def test_as_dict_is_json_friendly(self, cart, hoodie):
        cart.add(hoodie, 2)

        data = cart.as_dict()

        assert data["total_items"] == 2
        assert data["total_price"] == "99.90"
        assert data["items"][0]["line_total"] == "99.90"


class TestCartSession:
    def test_cart_persists_in_session(self, session, clock, hoodie):
        Cart(session, clock=clock).add(hoodie, 2, color="Black")

        cart = Cart(session, clock=clock)

        assert cart.total_items == 2
        assert session.modified is True

    def test_corrupt_session_data_resets_cart(self, session):
        session["shopping-cart"] = [{"id": 1, "name": "Broken"}]

        cart = Cart(session)

        assert cart.is_empty
        assert session["shopping-cart"] == []

    def test_non_positive_quantity_in_session_resets_cart(self, session):
        session["shopping-cart"] = [{"id": 1, "name": "Tee", "price": "10.00", "quantity": 0}]

        assert Cart(session).is_empty
