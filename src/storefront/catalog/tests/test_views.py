"""Tests for the public storefront pages."""

import pytest
from django.core.management import call_command
from django.urls import reverse

from storefront.catalog import services
from storefront.catalog.models import Category, Collection, Product


@pytest.mark.django_db
class TestHomeView:
    def test_home(self, client, product, make_product):
        offer = make_product(name="Offer Tee", is_temporary_offer=True)
        collection = services.create_collection("Winter", product_ids=[product.pk], is_featured=True)

        response = client.get(reverse("catalog:home"))

        assert response.status_code == 200
        assert list(response.context["special_offers"]) == [offer]
        assert response.context["featured_collection"] == collection
        assert product.name in response.content.decode()

    def test_home_without_products(self, client, db):
        response = client.get(reverse("catalog:home"))

        assert response.status_code == 200
        assert response.context["featured_collection"] is None


@pytest.mark.django_db
class TestProductPages:
    def test_product_list_filtered_by_category(self, client, product, make_product):
        caps = Category.objects.create(name="Caps")
        make_product(name="Cap", category=caps)

        response = client.get(reverse("catalog:product-list"), {"category": "caps"})

        assert [p.name for p in response.context["products"]] == ["Cap"]
        assert response.context["current_category"] == caps

    def test_unknown_category_404(self, client, db):
        response = client.get(reverse("catalog:category", args=["nope"]))

        assert response.status_code == 404
        assert "Page not found" in response.content.decode()

    def test_category_page(self, client, product, category):
        response = client.get(reverse("catalog:category", args=[category.slug]))

        assert response.status_code == 200
        assert list(response.context["products"]) == [product]

    def test_product_detail(self, client, product):
        response = client.get(product.get_absolute_url())

        assert response.status_code == 200
        content = response.content.decode()
        assert 'name="color" value="Black"' in content
        assert 'name="size" value="M"' in content

    def test_inactive_product_404(self, client, make_product):
        draft = make_product(name="Draft", is_active=False)

        response = client.get(draft.get_absolute_url())

        assert response.status_code == 404

    def test_collection_page(self, client, product):
        collection = services.create_collection("Winter", product_ids=[product.pk])

        response = client.get(collection.get_absolute_url())

        assert response.status_code == 200
        assert list(response.context["products"]) == [product]


@pytest.mark.django_db
class TestProductSearch:
    """Tests for GET /search/"""

    def test_search_results(self, client, product):
        response = client.get(reverse("catalog:search"), {"q": "hood"})

        assert response.status_code == 200
        results = response.json()["results"]
        assert results == [{
            "id": product.pk,
            "name": "Heavy Hoodie",
            "slug": "heavy-hoodie",
            "price": "49.95",
            "price_display": "€ 49.95",
            "image_url": "https://cdn.example.com/heavy-hoodie.jpg",
            "url": "/products/heavy-hoodie/",
        }]

    def test_empty_query(self, client, product):
        response = client.get(reverse("catalog:search"))

        assert response.json() == {"results": []}


@pytest.mark.django_db
class TestSeedStore:
    def test_seed_creates_demo_catalog(self):
        call_command("seed_store")

        assert Category.objects.count() == 3
        assert Product.objects.count() == 6
        collection = Collection.objects.get()
        assert collection.is_featured
        assert collection.products.count() == 3

    def test_seed_is_idempotent(self):
        call_command("seed_store")
        call_command("seed_store")

        assert Product.objects.count() == 6
        assert Collection.objects.count() == 1

    def test_force_recreates(self):
        call_command("seed_store")
        call_command("seed_store", "--force")

        assert Category.objects.count() == 3
        assert Product.objects.count() == 6
        assert Collection.objects.count() == 1
