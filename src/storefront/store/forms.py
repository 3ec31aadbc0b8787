from django import forms

from storefront.orders.models import Order


class CheckoutForm(forms.Form):
    first_name = forms.CharField(max_length=150)
    last_name = forms.CharField(max_length=150)
    email = forms.EmailField()
    phone = forms.CharField(max_length=30)
    address = forms.CharField(max_length=255)
    postal_code = forms.CharField(max_length=20)
    city = forms.CharField(max_length=100)
    country = forms.CharField(max_length=100, initial="Nederland")
    payment_method = forms.ChoiceField(
        choices=Order.PaymentMethod.choices,
        initial=Order.PaymentMethod.IDEAL,
        widget=forms.RadioSelect,
    )
    notes = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 3}))
    accept_terms = forms.BooleanField(
        error_messages={"required": "Accept the terms and conditions to continue."},
    )


class CartLineForm(forms.Form):
    """Identifies a cart line and an optional quantity in POST data."""

    product_id = forms.IntegerField()
    quantity = forms.IntegerField(required=False)
    color = forms.CharField(required=False)
    size = forms.CharField(required=False)
