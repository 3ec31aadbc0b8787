"""Tests for cart and checkout views."""

from decimal import Decimal

import pytest
from django.urls import reverse

from storefront.orders.models import Order

CHECKOUT_DATA = {
    "first_name": "Carla",
    "last_name": "Customer",
    "email": "carla@example.com",
    "phone": "0612345678",
    "address": "Kerkstraat 1",
    "postal_code": "1017 GA",
    "city": "Amsterdam",
    "country": "Nederland",
    "payment_method": "ideal",
    "accept_terms": "on",
}


def add_to_cart(client, product, quantity=1, **extra):
    data = {"product_id": product.pk, "quantity": quantity, **extra}
    return client.post(reverse("store:cart-add"), data)


def cart_lines(client):
    return client.session.get("shopping-cart", [])


# =============================================================================
# Cart mutations
# =============================================================================


@pytest.mark.django_db
class TestCartViews:
    def test_add_redirects_to_cart(self, client, product):
        response = add_to_cart(client, product, 2, color="Black", size="M")

        assert response.status_code == 302
        assert response.url == reverse("store:cart")
        lines = cart_lines(client)
        assert len(lines) == 1
        assert lines[0]["quantity"] == 2
        assert lines[0]["color"] == "Black"

    def test_add_honours_next(self, client, product):
        response = add_to_cart(client, product, next=product.get_absolute_url())

        assert response.url == product.get_absolute_url()

    def test_add_ignores_external_next(self, client, product):
        response = add_to_cart(client, product, next="https://evil.example.com/")

        assert response.url == reverse("store:cart")

    def test_add_json(self, client, product):
        response = client.post(
            reverse("store:cart-add"),
            {"product_id": product.pk, "quantity": 3},
            HTTP_X_REQUESTED_WITH="XMLHttpRequest",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["added"] is True
        assert data["cart"]["total_items"] == 3
        assert data["cart"]["total_price"] == "149.85"

    def test_add_invalid_quantity_json(self, client, product):
        response = client.post(
            reverse("store:cart-add"),
            {"product_id": product.pk, "quantity": 0},
            HTTP_X_REQUESTED_WITH="XMLHttpRequest",
        )

        assert response.status_code == 400
        assert response.json()["ok"] is False
        assert cart_lines(client) == []

    def test_add_inactive_product_404(self, client, make_product):
        hidden = make_product(name="Hidden", is_active=False)

        response = add_to_cart(client, hidden)

        assert response.status_code == 404

    def test_add_requires_post(self, client):
        response = client.get(reverse("store:cart-add"))

        assert response.status_code == 405

    def test_update_and_remove(self, client, product):
        add_to_cart(client, product, 1, color="Black", size="M")

        client.post(reverse("store:cart-update"), {
            "product_id": product.pk, "quantity": 5, "color": "Black", "size": "M",
        })
        assert cart_lines(client)[0]["quantity"] == 5

        client.post(reverse("store:cart-remove"), {
            "product_id": product.pk, "color": "Black", "size": "M",
        })
        assert cart_lines(client) == []

    def test_clear(self, client, product):
        add_to_cart(client, product, 2)

        response = client.post(reverse("store:cart-clear"))

        assert response.status_code == 302
        assert cart_lines(client) == []

    def test_cart_page_lists_lines(self, client, product):
        add_to_cart(client, product, 2)

        response = client.get(reverse("store:cart"))

        assert response.status_code == 200
        assert product.name in response.content.decode()
        assert response.context["cart_total_items"] == 2

    def test_summary(self, client, product):
        add_to_cart(client, product, 1)

        response = client.get(reverse("store:cart-summary"))

        assert response.json()["total_items"] == 1


# =============================================================================
# Checkout
# =============================================================================


@pytest.mark.django_db
class TestCheckoutView:
    def test_empty_cart_renders_empty_page(self, client):
        response = client.get(reverse("store:checkout"))

        assert response.status_code == 200
        assert "store/cart_empty.html" in [t.name for t in response.templates]

    def test_checkout_page_shows_totals(self, client, product):
        add_to_cart(client, product, 1)

        response = client.get(reverse("store:checkout"))

        assert response.status_code == 200
        totals = response.context["totals"]
        assert totals.subtotal == Decimal("49.95")
        assert totals.shipping_amount == Decimal("4.95")
        assert totals.total_amount == Decimal("54.90")

    def test_checkout_prefills_logged_in_user(self, customer_client, customer, product):
        add_to_cart(customer_client, product, 1)

        response = customer_client.get(reverse("store:checkout"))

        assert response.context["form"].initial["email"] == customer.email

    def test_guest_checkout_creates_order(self, client, product):
        add_to_cart(client, product, 2, color="Black", size="M")

        response = client.post(reverse("store:checkout"), CHECKOUT_DATA)

        order = Order.objects.get()
        assert response.status_code == 302
        assert response.url == reverse("store:checkout-complete", kwargs={"order_number": order.order_number})
        assert order.user is None
        assert order.email == "carla@example.com"
        assert order.subtotal == Decimal("99.90")
        assert order.shipping_amount == Decimal("0.00")
        assert order.total_amount == Decimal("99.90")
        item = order.items.get()
        assert item.quantity == 2
        assert item.color == "Black"
        assert cart_lines(client) == []

        product.refresh_from_db()
        assert product.sales_count == 2

    def test_checkout_links_logged_in_user(self, customer_client, customer, product):
        add_to_cart(customer_client, product, 1)

        customer_client.post(reverse("store:checkout"), CHECKOUT_DATA)

        assert Order.objects.get().user == customer

    def test_terms_must_be_accepted(self, client, product):
        add_to_cart(client, product, 1)
        data = {**CHECKOUT_DATA}
        del data["accept_terms"]

        response = client.post(reverse("store:checkout"), data)

        assert response.status_code == 200
        assert "accept_terms" in response.context["form"].errors
        assert not Order.objects.exists()

    def test_complete_page_visible_to_placing_session(self, client, product):
        add_to_cart(client, product, 1)
        response = client.post(reverse("store:checkout"), CHECKOUT_DATA, follow=True)

        assert response.status_code == 200
        assert response.context["order"].order_number in response.content.decode()

    def test_complete_page_hidden_from_other_sessions(self, client, product, other_customer):
        add_to_cart(client, product, 1)
        client.post(reverse("store:checkout"), CHECKOUT_DATA)
        order = Order.objects.get()

        client.logout()
        client.login(username=other_customer.email, password="testpass123")
        response = client.get(reverse("store:checkout-complete", kwargs={"order_number": order.order_number}))

        assert response.status_code == 404
