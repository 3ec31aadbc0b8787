"""Admin dashboard views."""

import logging

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.db.models import Q
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views import View
from django.views.generic import FormView, ListView, TemplateView

from storefront.account.forms import ProfileForm
from storefront.catalog import services as catalog_services
from storefront.catalog.exceptions import ProductValidationError
from storefront.catalog.models import Category, Collection, Product
from storefront.core.mixins import AdminRequiredMixin
from storefront.core.models import SiteSettings
from storefront.orders import services as order_services
from storefront.orders.exceptions import InvalidStatusError
from storefront.orders.models import Order

from . import analytics, services
from .exceptions import CannotDeleteSelfError
from .forms import (
    CategoryForm,
    CollectionForm,
    CustomerForm,
    OrderStatusForm,
    ProductForm,
    SiteSettingsForm,
    UserForm,
)

logger = logging.getLogger(__name__)


class DashboardView(AdminRequiredMixin, TemplateView):
    """Overview cards, recent orders and the best seller."""

    template_name = "dashboard/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            "page_title": "Dashboard",
            "stats": analytics.get_dashboard_stats(),
            "recent_orders": analytics.recent_orders(),
            "week_sales": analytics.week_sales(),
            "top_product": analytics.best_selling_product(),
        })
        return context


class AnalyticsView(AdminRequiredMixin, TemplateView):
    template_name = "dashboard/analytics.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = "Analytics"
        context["analytics"] = analytics.get_analytics_data()
        return context


class AnalyticsDataView(AdminRequiredMixin, View):
    """Chart data as JSON.

    GET /staff/analytics/data/
    """

    def get(self, request):
        data = analytics.get_analytics_data()
        data["top_products"] = [
            {"id": entry["product"].pk, "name": entry["product"].name, "sales": entry["sales"]}
            for entry in data["top_products"]
        ]
        return JsonResponse(data)


# Products

class ProductListView(AdminRequiredMixin, ListView):
    template_name = "dashboard/product_list.html"
    context_object_name = "products"
    paginate_by = 25

    def get_queryset(self):
        queryset = Product.objects.select_related("category").prefetch_related("images").order_by("-created_at")
        search = self.request.GET.get("q", "").strip()
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(sku__icontains=search))
        category = self.request.GET.get("category")
        if category:
            queryset = queryset.filter(category__slug=category)
        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            "page_title": "Products",
            "categories": Category.objects.order_by("name"),
            "search": self.request.GET.get("q", ""),
            "current_category": self.request.GET.get("category", ""),
        })
        return context


class ProductCreateView(AdminRequiredMixin, FormView):
    template_name = "dashboard/product_form.html"
    form_class = ProductForm

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = "New product"
        return context

    def form_valid(self, form):
        try:
            product = catalog_services.create_product(
                form.product_data(),
                image_file=form.cleaned_data.get("image"),
                image_urls=form.cleaned_data.get("image_urls"),
            )
        except ProductValidationError as e:
            form.add_error(None, str(e))
            return self.form_invalid(form)
        messages.success(self.request, f"Product {product.name} created.")
        return redirect("dashboard:product-list")


class ProductUpdateView(AdminRequiredMixin, FormView):
    template_name = "dashboard/product_form.html"
    form_class = ProductForm

    def dispatch(self, request, *args, **kwargs):
        self.product = get_object_or_404(Product, pk=kwargs["pk"])
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = self.product
        return kwargs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = f"Edit {self.product.name}"
        context["product"] = self.product
        context["product_collections"] = catalog_services.get_collections_for_product(self.product)
        return context

    def form_valid(self, form):
        try:
            catalog_services.update_product(
                self.product,
                form.product_data(),
                image_file=form.cleaned_data.get("image"),
                image_urls=form.cleaned_data.get("image_urls"),
                remove_images=form.cleaned_data.get("remove_images", False),
            )
        except ProductValidationError as e:
            form.add_error(None, str(e))
            return self.form_invalid(form)
        messages.success(self.request, f"Product {self.product.name} updated.")
        return redirect("dashboard:product-list")


class ProductTemporaryOfferView(AdminRequiredMixin, View):
    """Flip a product's temporary-offer flag from the product list."""

    http_method_names = ["post"]

    def post(self, request, pk):
        product = get_object_or_404(Product, pk=pk)
        catalog_services.set_temporary_offer(product, not product.is_temporary_offer)
        state = "marked as" if product.is_temporary_offer else "removed from"
        messages.success(request, f"{product.name} {state} temporary offer.")
        return redirect("dashboard:product-list")


class ProductDeleteView(AdminRequiredMixin, View):
    http_method_names = ["post"]

    def post(self, request, pk):
        product = get_object_or_404(Product, pk=pk)
        name = product.name
        catalog_services.delete_product(product)
        messages.success(request, f"Product {name} deleted.")
        return redirect("dashboard:product-list")


# Categories

class CategoryListView(AdminRequiredMixin, FormView):
    """Category overview with an inline create form."""

    template_name = "dashboard/category_list.html"
    form_class = CategoryForm

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = "Categories"
        context["categories"] = Category.objects.order_by("name")
        return context

    def form_valid(self, form):
        category = catalog_services.create_category(**form.cleaned_data)
        messages.success(self.request, f"Category {category.name} created.")
        return redirect("dashboard:category-list")


# Collections

class CollectionListView(AdminRequiredMixin, ListView):
    template_name = "dashboard/collection_list.html"
    context_object_name = "collections"

    def get_queryset(self):
        return catalog_services.get_collections().prefetch_related("products")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = "Collections"
        return context


class CollectionCreateView(AdminRequiredMixin, FormView):
    template_name = "dashboard/collection_form.html"
    form_class = CollectionForm

    def form_valid(self, form):
        data = dict(form.cleaned_data)
        products = data.pop("products")
        collection = catalog_services.create_collection(
            product_ids=[product.pk for product in products],
            **data,
        )
        messages.success(self.request, f"Collection {collection.name} created.")
        return redirect("dashboard:collection-list")


class CollectionUpdateView(AdminRequiredMixin, FormView):
    template_name = "dashboard/collection_form.html"
    form_class = CollectionForm

    def dispatch(self, request, *args, **kwargs):
        self.collection = get_object_or_404(Collection, pk=kwargs["pk"])
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        return {
            "name": self.collection.name,
            "description": self.collection.description,
            "hero_image": self.collection.hero_image,
            "is_featured": self.collection.is_featured,
            "display_order": self.collection.display_order,
            "products": self.collection.products.all(),
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["collection"] = self.collection
        return context

    def form_valid(self, form):
        data = dict(form.cleaned_data)
        products = data.pop("products")
        catalog_services.update_collection(
            self.collection,
            product_ids=[product.pk for product in products],
            **data,
        )
        messages.success(self.request, f"Collection {self.collection.name} updated.")
        return redirect("dashboard:collection-list")


class CollectionDeleteView(AdminRequiredMixin, View):
    http_method_names = ["post"]

    def post(self, request, pk):
        collection = get_object_or_404(Collection, pk=pk)
        catalog_services.delete_collection(collection)
        messages.success(request, "Collection deleted.")
        return redirect("dashboard:collection-list")


# Orders

class OrderListView(AdminRequiredMixin, ListView):
    template_name = "dashboard/order_list.html"
    context_object_name = "orders"
    paginate_by = 25

    def get_queryset(self):
        queryset = order_services.get_orders()
        status = self.request.GET.get("status", "all")
        if status and status != "all":
            queryset = queryset.filter(status=status)
        search = self.request.GET.get("q", "").strip()
        if search:
            queryset = queryset.filter(
                Q(order_number__icontains=search)
                | Q(email__icontains=search)
                | Q(last_name__icontains=search)
            )
        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        all_orders = Order.objects.all()
        context.update({
            "page_title": "Orders",
            "statuses": Order.Status.choices,
            "current_status": self.request.GET.get("status", "all"),
            "search": self.request.GET.get("q", ""),
            "paid_count": all_orders.filter(payment_status=Order.PaymentStatus.PAID).count(),
            "pending_count": all_orders.filter(status=Order.Status.PENDING).count(),
        })
        return context


class OrderDetailView(AdminRequiredMixin, FormView):
    """Order with its items and the status update form."""

    template_name = "dashboard/order_detail.html"
    form_class = OrderStatusForm

    def dispatch(self, request, *args, **kwargs):
        self.order = order_services.get_order_by_id(kwargs["pk"])
        if self.order is None:
            raise Http404("Order not found")
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        return {"status": self.order.status, "payment_status": self.order.payment_status}

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = f"Order {self.order.order_number}"
        context["order"] = self.order
        return context

    def form_valid(self, form):
        try:
            changed = order_services.update_order_status(self.order, form.cleaned_data["status"])
            payment_status = form.cleaned_data.get("payment_status")
            if payment_status:
                changed = order_services.update_payment_status(self.order, payment_status) or changed
        except InvalidStatusError as e:
            form.add_error(None, str(e))
            return self.form_invalid(form)
        if changed:
            messages.success(self.request, "Order status updated.")
        return redirect("dashboard:order-detail", pk=self.order.pk)


# Customers

class CustomerListView(AdminRequiredMixin, ListView):
    template_name = "dashboard/customer_list.html"
    context_object_name = "customers"
    paginate_by = 25

    def get_queryset(self):
        return services.get_customers(self.request.GET.get("q"))

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = "Customers"
        context["search"] = self.request.GET.get("q", "")
        return context


class CustomerDetailView(AdminRequiredMixin, FormView):
    """Customer details, order history and edit form."""

    template_name = "dashboard/customer_detail.html"
    form_class = CustomerForm

    def dispatch(self, request, *args, **kwargs):
        self.customer = services.get_customer_by_id(kwargs["pk"])
        if self.customer is None:
            raise Http404("Customer not found")
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["customer"] = self.customer
        return kwargs

    def get_initial(self):
        return {
            "first_name": self.customer.first_name,
            "last_name": self.customer.last_name,
            "email": self.customer.email,
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = self.customer.get_display_name()
        context["customer"] = self.customer
        context["orders"] = order_services.get_customer_orders(self.customer)
        return context

    def form_valid(self, form):
        services.update_customer(self.customer, **form.cleaned_data)
        messages.success(self.request, "Customer updated.")
        return redirect("dashboard:customer-detail", pk=self.customer.pk)


class CustomerDeleteView(AdminRequiredMixin, View):
    http_method_names = ["post"]

    def post(self, request, pk):
        customer = services.get_customer_by_id(pk)
        if customer is None:
            raise Http404("Customer not found")
        services.delete_customer(customer)
        messages.success(request, "Customer deleted.")
        return redirect("dashboard:customer-list")


# Users

class UserListView(AdminRequiredMixin, ListView):
    template_name = "dashboard/user_list.html"
    context_object_name = "users"
    paginate_by = 25

    def get_queryset(self):
        return services.get_users(
            search=self.request.GET.get("q"),
            role=self.request.GET.get("role"),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            "page_title": "Users",
            "counts": services.get_user_counts(),
            "roles": get_user_model().Role.choices,
            "search": self.request.GET.get("q", ""),
            "current_role": self.request.GET.get("role", "all"),
        })
        return context


class UserUpdateView(AdminRequiredMixin, FormView):
    template_name = "dashboard/user_form.html"
    form_class = UserForm

    def dispatch(self, request, *args, **kwargs):
        self.target = get_object_or_404(get_user_model(), pk=kwargs["pk"])
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        return {
            "first_name": self.target.first_name,
            "last_name": self.target.last_name,
            "role": self.target.role,
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = f"Edit {self.target.email}"
        context["target"] = self.target
        return context

    def form_valid(self, form):
        services.update_user(self.target, **form.cleaned_data)
        messages.success(self.request, "User updated.")
        return redirect("dashboard:user-list")


class UserDeleteView(AdminRequiredMixin, View):
    http_method_names = ["post"]

    def post(self, request, pk):
        target = get_object_or_404(get_user_model(), pk=pk)
        try:
            services.delete_user(target, acting_user=request.user)
        except CannotDeleteSelfError as e:
            messages.error(request, str(e))
        else:
            messages.success(request, "User deleted.")
        return redirect("dashboard:user-list")


# Settings

class SettingsView(AdminRequiredMixin, TemplateView):
    """Website settings and the admin's own account details.

    Both forms post here; the ``section`` field says which one.
    """

    template_name = "dashboard/settings.html"

    def get_forms(self, data=None):
        user = self.request.user
        site_data = data if data is not None and data.get("section") == "website" else None
        account_data = data if data is not None and data.get("section") == "account" else None
        return {
            "site_form": SiteSettingsForm(site_data, instance=SiteSettings.load()),
            "account_form": ProfileForm(
                account_data,
                initial={"first_name": user.first_name, "last_name": user.last_name},
            ),
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = "Settings"
        for name, form in self.get_forms().items():
            context.setdefault(name, form)
        return context

    def post(self, request):
        forms = self.get_forms(request.POST)
        section = request.POST.get("section")
        if section == "website" and forms["site_form"].is_valid():
            forms["site_form"].save()
            messages.success(request, "Website settings saved.")
            return redirect("dashboard:settings")
        if section == "account" and forms["account_form"].is_valid():
            user = request.user
            user.first_name = forms["account_form"].cleaned_data["first_name"]
            user.last_name = forms["account_form"].cleaned_data["last_name"]
            user.save(update_fields=["first_name", "last_name", "updated_at"])
            messages.success(request, "Account details saved.")
            return redirect("dashboard:settings")
        return self.render_to_response(self.get_context_data(**forms))
