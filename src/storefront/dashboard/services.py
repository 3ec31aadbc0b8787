"""Customer and user management for the admin dashboard."""

import logging

from django.contrib.auth import get_user_model
from django.db.models import Q

from .exceptions import CannotDeleteSelfError, NotACustomerError

logger = logging.getLogger(__name__)

CUSTOMER_FIELDS = ("first_name", "last_name", "email")
USER_FIELDS = ("first_name", "last_name", "role")


def _search(queryset, search):
    search = (search or "").strip()
    if not search:
        return queryset
    return queryset.filter(
        Q(email__icontains=search)
        | Q(first_name__icontains=search)
        | Q(last_name__icontains=search)
    )


# Customers

def get_customers(search=None):
    """Customer accounts, newest first."""
    User = get_user_model()
    return _search(User.objects.customers(), search).order_by("-date_joined")


def get_customer_by_id(customer_id):
    return get_customers().filter(pk=customer_id).first()


def update_customer(customer, **data):
    """Update a customer's name and email.

    Raises:
        NotACustomerError: If the account is not a customer
    """
    if customer.role != customer.Role.CUSTOMER:
        raise NotACustomerError(f"{customer.email} is not a customer")
    update_fields = ["updated_at"]
    for field in CUSTOMER_FIELDS:
        if field in data:
            setattr(customer, field, data[field])
            update_fields.append(field)
    customer.save(update_fields=update_fields)
    logger.info("Updated customer %s", customer.pk)
    return customer


def delete_customer(customer):
    if customer.role != customer.Role.CUSTOMER:
        raise NotACustomerError(f"{customer.email} is not a customer")
    pk = customer.pk
    customer.delete()
    logger.info("Deleted customer %s", pk)


# Users

def get_users(search=None, role=None):
    """All accounts, newest first, with optional search and role filter."""
    User = get_user_model()
    queryset = _search(User.objects.all(), search)
    if role and role != "all":
        queryset = queryset.filter(role=role)
    return queryset.order_by("-date_joined")


def get_user_counts():
    User = get_user_model()
    return {
        "total": User.objects.count(),
        "admins": User.objects.filter(role=User.Role.ADMIN).count(),
        "customers": User.objects.filter(role=User.Role.CUSTOMER).count(),
    }


def update_user(user, **data):
    update_fields = ["updated_at"]
    for field in USER_FIELDS:
        if field in data:
            setattr(user, field, data[field])
            update_fields.append(field)
    user.save(update_fields=update_fields)
    logger.info("Updated user %s (role %s)", user.pk, user.role)
    return user


def delete_user(user, acting_user):
    """Delete an account.

    Raises:
        CannotDeleteSelfError: If ``user`` is the acting admin
    """
    if user.pk == acting_user.pk:
        raise CannotDeleteSelfError()
    pk = user.pk
    user.delete()
    logger.info("User %s deleted by %s", pk, acting_user.pk)
