"""Cart and checkout views."""

import logging

from django.contrib import messages
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import FormView, TemplateView

from storefront.catalog.models import Product
from storefront.orders import services as order_services

from . import services
from .cart import Cart
from .exceptions import CartError, EmptyCartError
from .forms import CartLineForm, CheckoutForm

logger = logging.getLogger(__name__)

LAST_ORDER_SESSION_KEY = "last_order_number"


def wants_json(request):
    return (
        request.headers.get("x-requested-with") == "XMLHttpRequest"
        or "application/json" in request.headers.get("accept", "")
    )


class CartDetailView(TemplateView):
    template_name = "store/cart.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["cart"] = Cart(self.request.session)
        return context


class CartActionView(View):
    """Base for POST-only cart mutations.

    Responds with the cart as JSON for fetch requests, otherwise redirects
    to ``next`` or the cart page.
    """

    http_method_names = ["post"]

    def post(self, request):
        form = CartLineForm(request.POST)
        if not form.is_valid():
            return self.respond(request, Cart(request.session), ok=False, error="Invalid cart request")

        cart = Cart(request.session)
        try:
            extra = self.apply(cart, form.cleaned_data) or {}
        except CartError as e:
            return self.respond(request, cart, ok=False, error=str(e))
        return self.respond(request, cart, ok=True, **extra)

    def apply(self, cart, data):
        raise NotImplementedError

    def respond(self, request, cart, ok, error=None, **extra):
        if wants_json(request):
            payload = {"ok": ok, "cart": cart.as_dict(), **extra}
            if error:
                payload["error"] = error
            return JsonResponse(payload, status=200 if ok else 400)

        if error:
            messages.error(request, error)
        next_url = request.POST.get("next")
        if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
            return redirect(next_url)
        return redirect("store:cart")


class CartAddView(CartActionView):
    def apply(self, cart, data):
        product = get_object_or_404(Product.objects.active(), pk=data["product_id"])
        added = cart.add(product, data["quantity"], color=data["color"], size=data["size"])
        if added and not wants_json(self.request):
            messages.success(self.request, f"{product.name} added to your cart.")
        return {"added": added}


class CartUpdateView(CartActionView):
    def apply(self, cart, data):
        if data["quantity"] is None:
            raise CartError("Quantity is required")
        cart.update_quantity(data["product_id"], data["quantity"], color=data["color"], size=data["size"])


class CartRemoveView(CartActionView):
    def apply(self, cart, data):
        cart.remove(data["product_id"], color=data["color"], size=data["size"])


class CartClearView(View):
    http_method_names = ["post"]

    def post(self, request):
        cart = Cart(request.session)
        cart.clear()
        if wants_json(request):
            return JsonResponse({"ok": True, "cart": cart.as_dict()})
        return redirect("store:cart")


def cart_summary(request):
    """Cart contents for the cart drawer."""
    return JsonResponse(Cart(request.session).as_dict())


class CheckoutView(FormView):
    template_name = "store/checkout.html"
    form_class = CheckoutForm

    def dispatch(self, request, *args, **kwargs):
        self.cart = Cart(request.session)
        if self.cart.is_empty:
            return render(request, "store/cart_empty.html")
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        initial = super().get_initial()
        user = self.request.user
        if user.is_authenticated:
            initial.update({
                "first_name": user.first_name,
                "last_name": user.last_name,
                "email": user.email,
            })
        return initial

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["cart"] = self.cart
        context["totals"] = order_services.calculate_totals(self.cart.total_price)
        return context

    def form_valid(self, form):
        try:
            order = services.place_order(self.cart, form.cleaned_data, user=self.request.user)
        except EmptyCartError as e:
            messages.error(self.request, str(e))
            return redirect("store:cart")
        self.request.session[LAST_ORDER_SESSION_KEY] = order.order_number
        return redirect(reverse("store:checkout-complete", kwargs={"order_number": order.order_number}))


class CheckoutCompleteView(TemplateView):
    """Order confirmation, visible to the session that placed it or its owner."""

    template_name = "store/checkout_complete.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        order = order_services.get_order_by_number(self.kwargs["order_number"])
        if order is None or not self.can_view(order):
            raise Http404("Order not found")
        context["order"] = order
        return context

    def can_view(self, order):
        if self.request.session.get(LAST_ORDER_SESSION_KEY) == order.order_number:
            return True
        user = self.request.user
        return user.is_authenticated and (order.user_id == user.pk or user.is_admin)
