"""Catalog service layer.

Views call these functions instead of querying the models directly.
"""

import json
import logging
from decimal import Decimal, InvalidOperation

from django.db import transaction

from storefront.core import conf

from . import storage
from .exceptions import ProductValidationError
from .models import Category, Collection, Product, ProductImage

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = [
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
    "sizes",
]


# Categories

def get_categories():
    """Active categories ordered by name."""
    return Category.objects.active().order_by("name")


def get_category_by_slug(slug):
    return Category.objects.active().filter(slug=slug).first()


def create_category(**data):
    category = Category.objects.create(**data)
    logger.info("Created category %s (%s)", category.name, category.slug)
    return category


# Products

def _product_queryset():
    return Product.objects.active().select_related("category").prefetch_related("images")


def get_products(category=None):
    """Active products, newest first, optionally limited to one category."""
    queryset = _product_queryset().order_by("-created_at")
    if category is not None:
        queryset = queryset.filter(category=category)
    return queryset


def get_product_by_slug(slug):
    return _product_queryset().filter(slug=slug).first()


def search_products(query, limit=None):
    """Active products whose name contains ``query``."""
    query = (query or "").strip()
    if not query:
        return Product.objects.none()
    if limit is None:
        limit = conf.get_setting("SEARCH_RESULT_LIMIT")
    return _product_queryset().filter(name__icontains=query).order_by("name")[:limit]


def get_special_offers(limit=None):
    """Active temporary offers for the home page carousel."""
    if limit is None:
        limit = conf.get_setting("HOMEPAGE_PRODUCT_LIMIT")
    return _product_queryset().filter(is_temporary_offer=True).order_by("-created_at")[:limit]


def get_homepage_products(limit=None):
    if limit is None:
        limit = conf.get_setting("HOMEPAGE_PRODUCT_LIMIT")
    return _product_queryset().order_by("-created_at")[:limit]


def parse_image_input(value):
    """Parse image URLs posted as a JSON array or as one plain URL."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [url for url in value if url]
    try:
        parsed = json.loads(value)
    except (TypeError, ValueError):
        return [value.strip()] if value.strip() else []
    if isinstance(parsed, list):
        return [str(url) for url in parsed if url]
    if isinstance(parsed, str) and parsed:
        return [parsed]
    return []


def validate_product_data(data):
    """Check required fields and coerce the price.

    Raises:
        ProductValidationError: If name, price or category is missing
            or the price is not a number.
    """
    missing = [field for field in ("name", "price", "category") if not data.get(field)]
    if missing:
        raise ProductValidationError("Name, price and category are required", fields=missing)
    try:
        data["price"] = Decimal(str(data["price"]))
    except InvalidOperation:
        raise ProductValidationError("Price must be a number", fields=["price"])
    if data["price"] < 0:
        raise ProductValidationError("Price cannot be negative", fields=["price"])
    return data


def _set_images(product, urls):
    for index, url in enumerate(urls):
        ProductImage.objects.create(
            product=product,
            url=url,
            alt_text=product.name,
            sort_order=index,
            is_primary=index == 0,
        )


def _stored_image_urls(product):
    return list(product.images.values_list("url", flat=True))


@transaction.atomic
def create_product(data, image_file=None, image_urls=None):
    """Create a product with its images.

    An uploaded ``image_file`` wins over ``image_urls``, which may be a
    list or the raw JSON / plain URL string posted by the form.
    """
    data = validate_product_data(dict(data))
    fields = {key: value for key, value in data.items() if key in PRODUCT_FIELDS}
    product = Product.objects.create(**fields)

    urls = []
    if image_file is not None and image_file.size > 0:
        uploaded = storage.upload_image(image_file, product.name)
        if uploaded:
            urls = [uploaded]
    elif image_urls:
        urls = parse_image_input(image_urls)
    _set_images(product, urls)

    logger.info("Created product %s (%s)", product.name, product.pk)
    return product


@transaction.atomic
def update_product(product, data, image_file=None, image_urls=None, remove_images=False):
    """Update a product.

    Image handling, first match wins: ``remove_images`` drops all images,
    an uploaded file replaces them, posted URLs replace them, otherwise the
    current images are kept.
    """
    data = validate_product_data(dict(data))
    for key, value in data.items():
        if key in PRODUCT_FIELDS:
            setattr(product, key, value)
    product.save()

    if remove_images:
        storage.delete_images(_stored_image_urls(product))
        product.images.all().delete()
    elif image_file is not None and image_file.size > 0:
        uploaded = storage.upload_image(image_file, product.name)
        if uploaded:
            storage.delete_images(_stored_image_urls(product))
            product.images.all().delete()
            _set_images(product, [uploaded])
        else:
            logger.warning("Keeping current images of product %s, upload failed", product.pk)
    elif image_urls:
        product.images.all().delete()
        _set_images(product, parse_image_input(image_urls))

    logger.info("Updated product %s (%s)", product.name, product.pk)
    return product


def set_temporary_offer(product, is_temporary_offer):
    product.is_temporary_offer = bool(is_temporary_offer)
    product.save(update_fields=["is_temporary_offer", "updated_at"])
    logger.info("Set temporary offer of product %s to %s", product.pk, product.is_temporary_offer)
    return product


def delete_product(product):
    """Delete stored images, then the product row."""
    storage.delete_images(_stored_image_urls(product))
    pk = product.pk
    product.delete()
    logger.info("Deleted product %s", pk)
    return True


# Collections

def get_collections():
    return Collection.objects.order_by("display_order", "name")


def get_collection_by_slug(slug):
    return Collection.objects.filter(slug=slug).first()


def get_featured_collection():
    """First featured collection by display order, or None."""
    return Collection.objects.filter(is_featured=True).order_by("display_order", "name").first()


def _resolve_products(product_ids):
    ids = [str(pk).strip() for pk in product_ids if str(pk).strip()]
    return list(Product.objects.filter(pk__in=ids))


@transaction.atomic
def create_collection(name, product_ids=None, **data):
    if not name:
        raise ValueError("Name is required")
    collection = Collection.objects.create(name=name, **data)
    if product_ids:
        collection.products.set(_resolve_products(product_ids))
    logger.info("Created collection %s", collection.slug)
    return collection


@transaction.atomic
def update_collection(collection, name, product_ids=None, **data):
    """Update a collection.

    ``product_ids=None`` leaves the product links alone; any list (even
    an empty one) replaces them.
    """
    if not name:
        raise ValueError("Name is required")
    collection.name = name
    for key, value in data.items():
        setattr(collection, key, value)
    collection.save()
    if product_ids is not None:
        collection.products.set(_resolve_products(product_ids))
    logger.info("Updated collection %s", collection.slug)
    return collection


def delete_collection(collection):
    slug = collection.slug
    collection.delete()
    logger.info("Deleted collection %s", slug)


def get_products_in_collection(collection):
    return collection.products.active().prefetch_related("images").order_by("-created_at")


def add_product_to_collection(product, collection):
    collection.products.add(product)


def remove_product_from_collection(product, collection):
    collection.products.remove(product)


def get_collections_for_product(product):
    return product.collections.order_by("display_order", "name")


def update_product_collections(product, collection_ids):
    """Replace all collection links of a product."""
    product.collections.set(Collection.objects.filter(pk__in=collection_ids))
