"""Forms for the admin dashboard."""

from django import forms
from django.contrib.auth import get_user_model

from storefront.catalog.models import Category, Product, unique_slug
from storefront.core.models import SiteSettings
from storefront.orders.models import Order


class ProductForm(forms.ModelForm):
    image = forms.FileField(required=False)
    image_urls = forms.CharField(
        required=False,
        help_text="One image URL, or a JSON list of URLs.",
    )
    remove_images = forms.BooleanField(required=False)
    sizes = forms.CharField(required=False, help_text="Comma separated, e.g. S, M, L")

    class Meta:
        model = Product
        fields = [
            "name",
            "description",
            "price",
            "compare_price",
            "cost_price",
            "sku",
            "barcode",
            "track_quantity",
            "quantity",
            "weight",
            "requires_shipping",
            "taxable",
            "is_active",
            "is_digital",
            "is_temporary_offer",
            "category",
            "colors",
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["category"].required = True
        self.fields["category"].queryset = Category.objects.active()
        self.fields["colors"].required = False
        if self.instance.pk:
            self.initial["sizes"] = ", ".join(self.instance.sizes)

    def clean_sizes(self):
        value = self.cleaned_data.get("sizes") or ""
        return [size.strip() for size in value.split(",") if size.strip()]

    def clean_colors(self):
        colors = self.cleaned_data.get("colors") or []
        if not isinstance(colors, list):
            raise forms.ValidationError("Colors must be a list.")
        return colors

    def product_data(self):
        """Cleaned values for the product fields only."""
        data = {name: self.cleaned_data[name] for name in self.Meta.fields if name in self.cleaned_data}
        data["sizes"] = self.cleaned_data.get("sizes", [])
        return data


class CategoryForm(forms.ModelForm):
    class Meta:
        model = Category
        fields = ["name", "slug", "description", "image_url", "is_active"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["slug"].required = False

    def clean_slug(self):
        slug = self.cleaned_data.get("slug")
        if not slug and self.cleaned_data.get("name"):
            slug = unique_slug(Category, self.cleaned_data["name"], self.instance.pk)
        return slug


class CollectionForm(forms.Form):
    name = forms.CharField(max_length=100)
    description = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 3}))
    hero_image = forms.CharField(required=False, max_length=500)
    is_featured = forms.BooleanField(required=False)
    display_order = forms.IntegerField(required=False, initial=0)
    products = forms.ModelMultipleChoiceField(
        queryset=Product.objects.order_by("name"),
        required=False,
    )

    def clean_display_order(self):
        return self.cleaned_data.get("display_order") or 0


class OrderStatusForm(forms.Form):
    status = forms.ChoiceField(choices=Order.Status.choices)
    payment_status = forms.ChoiceField(choices=Order.PaymentStatus.choices, required=False)


class CustomerForm(forms.Form):
    first_name = forms.CharField(max_length=150, required=False)
    last_name = forms.CharField(max_length=150, required=False)
    email = forms.EmailField()

    def __init__(self, *args, customer=None, **kwargs):
        self.customer = customer
        super().__init__(*args, **kwargs)

    def clean_email(self):
        email = self.cleaned_data["email"].strip().lower()
        others = get_user_model().objects.filter(email__iexact=email)
        if self.customer is not None:
            others = others.exclude(pk=self.customer.pk)
        if others.exists():
            raise forms.ValidationError("An account with this email address already exists.")
        return email


class UserForm(forms.Form):
    first_name = forms.CharField(max_length=150, required=False)
    last_name = forms.CharField(max_length=150, required=False)
    role = forms.ChoiceField(choices=get_user_model().Role.choices)


class SiteSettingsForm(forms.ModelForm):
    class Meta:
        model = SiteSettings
        fields = ["website_name", "description", "contact_email", "contact_phone"]
