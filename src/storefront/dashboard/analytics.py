"""Sales analytics for the admin dashboard.

Time series cover the last 12 calendar months, oldest first. Every
function takes an optional ``now`` so results are reproducible; it
defaults to the current time in the store's time zone.
"""

import logging
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.db.models import Count, Sum
from django.db.models.functions import Coalesce
from django.utils import dateformat, timezone

from storefront.catalog.models import Category, Product
from storefront.orders.models import Order

logger = logging.getLogger(__name__)

MONTHS = 12


def _local_date(value):
    if isinstance(value, date) and not hasattr(value, "hour"):
        return value
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.date()


def _now(now=None):
    return now or timezone.now()


def month_buckets(now=None, months=MONTHS):
    """Return ``(year, month)`` pairs for the window ending at ``now``."""
    today = _local_date(_now(now))
    year, month = today.year, today.month
    buckets = []
    for _ in range(months):
        buckets.append((year, month))
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    return list(reversed(buckets))


def month_index(value, now=None, months=MONTHS):
    """Position of ``value`` in the monthly window, or None when outside it."""
    today = _local_date(_now(now))
    day = _local_date(value)
    index = months - 1 - ((today.year - day.year) * 12 + today.month - day.month)
    if 0 <= index < months:
        return index
    return None


def _empty_series(metric, zero, now=None):
    return [
        {
            "key": f"{year:04d}-{month:02d}",
            "month": dateformat.format(date(year, month, 1), "M y"),
            metric: zero,
        }
        for year, month in month_buckets(now)
    ]


def _bucket(records, metric, zero, value_of, date_of, now=None):
    series = _empty_series(metric, zero, now)
    for record in records:
        index = month_index(date_of(record), now)
        if index is not None:
            series[index][metric] += value_of(record)
    return series


def revenue_over_time(orders, now=None):
    """Order revenue per month."""
    return _bucket(
        orders,
        "revenue",
        Decimal("0"),
        value_of=lambda order: order.total_amount or Decimal("0"),
        date_of=lambda order: order.created_at,
        now=now,
    )


def orders_over_time(orders, now=None):
    """Number of orders per month."""
    return _bucket(
        orders,
        "orders",
        0,
        value_of=lambda order: 1,
        date_of=lambda order: order.created_at,
        now=now,
    )


def customer_growth(customers, now=None):
    """New customer sign-ups per month."""
    return _bucket(
        customers,
        "customers",
        0,
        value_of=lambda customer: 1,
        date_of=lambda customer: customer.date_joined,
        now=now,
    )


def top_products(limit=5):
    """Products ranked by units sold, ties broken by name."""
    products = (
        Product.objects.annotate(units_sold=Coalesce(Sum("order_items__quantity"), 0))
        .order_by("-units_sold", "name")[:limit]
    )
    return [{"product": product, "sales": product.units_sold} for product in products]


def _percentage(count, total):
    if not total:
        return 0
    value = Decimal(count) * 100 / Decimal(total)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def order_status_distribution(orders):
    """Count and share of each order status present in ``orders``."""
    orders = list(orders)
    counts = {}
    for order in orders:
        counts[order.status] = counts.get(order.status, 0) + 1

    labels = dict(Order.Status.choices)
    return [
        {
            "status": status,
            "label": labels.get(status, status),
            "count": count,
            "percentage": _percentage(count, len(orders)),
        }
        for status, count in counts.items()
    ]


def monthly_revenue(orders, now=None):
    """Revenue of this month against last month, with growth in percent."""
    this_month = Decimal("0")
    last_month = Decimal("0")
    for order in orders:
        index = month_index(order.created_at, now)
        if index == MONTHS - 1:
            this_month += order.total_amount or Decimal("0")
        elif index == MONTHS - 2:
            last_month += order.total_amount or Decimal("0")

    if last_month > 0:
        growth = ((this_month - last_month) / last_month * 100).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
    else:
        growth = Decimal("0")

    return {"this_month": this_month, "last_month": last_month, "growth": growth}


def empty_analytics():
    return {
        "revenue_over_time": [],
        "orders_over_time": [],
        "top_products": [],
        "customer_growth": [],
        "order_status_distribution": [],
        "monthly_revenue": {
            "this_month": Decimal("0"),
            "last_month": Decimal("0"),
            "growth": Decimal("0"),
        },
    }


def get_analytics_data(now=None):
    """Everything the analytics page charts, in one structure.

    A database failure is logged and yields the empty structure so the
    dashboard still renders.
    """
    try:
        orders = list(Order.objects.order_by("-created_at"))
        customers = list(get_user_model().objects.customers())
        return {
            "revenue_over_time": revenue_over_time(orders, now),
            "orders_over_time": orders_over_time(orders, now),
            "top_products": top_products(),
            "customer_growth": customer_growth(customers, now),
            "order_status_distribution": order_status_distribution(orders),
            "monthly_revenue": monthly_revenue(orders, now),
        }
    except DatabaseError:
        logger.exception("Error in get_analytics_data")
        return empty_analytics()


def get_dashboard_stats():
    """Headline numbers for the dashboard cards."""
    order_stats = Order.objects.aggregate(
        total_orders=Count("id"),
        total_revenue=Coalesce(Sum("total_amount"), Decimal("0")),
    )
    return {
        "total_orders": order_stats["total_orders"],
        "total_revenue": order_stats["total_revenue"],
        "total_products": Product.objects.active().count(),
        "total_categories": Category.objects.active().count(),
        "total_customers": get_user_model().objects.customers().count(),
    }


def recent_orders(limit=4):
    return Order.objects.prefetch_related("items").order_by("-created_at")[:limit]


def week_sales(now=None):
    """Revenue of orders placed in the last 7 days."""
    since = _now(now) - timedelta(days=7)
    return Order.objects.filter(created_at__gte=since).aggregate(
        total=Coalesce(Sum("total_amount"), Decimal("0"))
    )["total"]


def best_selling_product():
    """Product with the highest sales count, or None when nothing sold yet."""
    return Product.objects.filter(sales_count__gt=0).order_by("-sales_count", "name").first()
