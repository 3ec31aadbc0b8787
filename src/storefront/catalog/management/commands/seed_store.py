"""Management command to seed demo categories, products and a collection."""

from decimal import Decimal

from django.core.management.base import BaseCommand

from storefront.catalog import services
from storefront.catalog.models import Category, Collection, Product


CATEGORIES = [
    {
        "name": "T-shirts",
        "slug": "t-shirts",
        "description": "Organic cotton tees in every colour.",
    },
    {
        "name": "Hoodies",
        "slug": "hoodies",
        "description": "Heavyweight hoodies for cold days.",
    },
    {
        "name": "Accessories",
        "slug": "accessories",
        "description": "Caps, bags and everything else.",
    },
]


COLORS = [
    {"name": "Black", "color_code": "#000000"},
    {"name": "White", "color_code": "#FFFFFF"},
    {"name": "Navy", "color_code": "#1E3A8A"},
]


PRODUCTS = [
    {
        "name": "Classic Tee",
        "category_slug": "t-shirts",
        "description": "Regular fit t-shirt in 100% organic cotton.",
        "price": "24.95",
        "compare_price": "29.95",
        "sku": "TEE-001",
        "quantity": 120,
        "colors": COLORS,
        "sizes": ["S", "M", "L", "XL"],
        "is_temporary_offer": True,
        "image_url": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=800",
    },
    {
        "name": "Pocket Tee",
        "category_slug": "t-shirts",
        "description": "Relaxed fit tee with a chest pocket.",
        "price": "27.50",
        "sku": "TEE-002",
        "quantity": 80,
        "colors": COLORS[:2],
        "sizes": ["S", "M", "L"],
        "image_url": "https://images.unsplash.com/photo-1583743814966-8936f5b7be1a?w=800",
    },
    {
        "name": "Heavy Hoodie",
        "category_slug": "hoodies",
        "description": "450 gsm brushed fleece hoodie.",
        "price": "69.00",
        "compare_price": "79.00",
        "sku": "HOOD-001",
        "quantity": 45,
        "colors": [COLORS[0], COLORS[2]],
        "sizes": ["M", "L", "XL"],
        "is_temporary_offer": True,
        "image_url": "https://images.unsplash.com/photo-1556821840-3a63f95609a7?w=800",
    },
    {
        "name": "Zip Hoodie",
        "category_slug": "hoodies",
        "description": "Full zip hoodie with kangaroo pockets.",
        "price": "74.95",
        "sku": "HOOD-002",
        "quantity": 30,
        "colors": COLORS[:1],
        "sizes": ["S", "M", "L", "XL"],
        "image_url": "https://images.unsplash.com/photo-1620799140408-edc6dcb6d633?w=800",
    },
    {
        "name": "Canvas Tote",
        "category_slug": "accessories",
        "description": "Sturdy tote bag, fits a laptop.",
        "price": "14.95",
        "sku": "ACC-001",
        "quantity": 200,
        "image_url": "https://images.unsplash.com/photo-1597484661643-2f5fef640dd1?w=800",
    },
    {
        "name": "Dad Cap",
        "category_slug": "accessories",
        "description": "Washed cotton cap with an embroidered logo.",
        "price": "19.95",
        "sku": "ACC-002",
        "quantity": 60,
        "colors": [COLORS[0], COLORS[2]],
        "image_url": "https://images.unsplash.com/photo-1588850561407-ed78c282e89b?w=800",
    },
]


COLLECTION = {
    "name": "Winter Essentials",
    "description": "Everything you need when it gets cold.",
    "hero_image": "https://images.unsplash.com/photo-1483985988355-763728e1935b?w=1600",
    "is_featured": True,
    "products": ["Heavy Hoodie", "Zip Hoodie", "Dad Cap"],
}


class Command(BaseCommand):
    help = "Seed demo categories, products and a featured collection"

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Delete existing demo categories and products and recreate",
        )

    def handle(self, *args, **options):
        # Create categories
        self.stdout.write("\nCreating categories...")
        category_map = {}
        for cat_data in CATEGORIES:
            existing = Category.objects.filter(slug=cat_data["slug"]).first()
            if existing:
                if options["force"]:
                    existing.delete()
                    self.stdout.write(f"  Deleted existing category: {cat_data['name']}")
                else:
                    self.stdout.write(f"  Skipping existing category: {cat_data['name']}")
                    category_map[cat_data["slug"]] = existing
                    continue

            category_map[cat_data["slug"]] = services.create_category(**cat_data)
            self.stdout.write(self.style.SUCCESS(f"  Created: {cat_data['name']}"))

        # Create products
        self.stdout.write("\nCreating products...")
        product_map = {}
        for product_data in PRODUCTS:
            data = dict(product_data)
            image_url = data.pop("image_url")
            category = category_map[data.pop("category_slug")]

            existing = Product.objects.filter(sku=data["sku"]).first()
            if existing:
                if options["force"]:
                    services.delete_product(existing)
                    self.stdout.write(f"  Deleted existing product: {data['name']}")
                else:
                    self.stdout.write(f"  Skipping existing product: {data['name']}")
                    product_map[data["name"]] = existing
                    continue

            data["category"] = category
            data["price"] = Decimal(data["price"])
            if "compare_price" in data:
                data["compare_price"] = Decimal(data["compare_price"])
            product = services.create_product(data, image_urls=[image_url])
            product_map[product.name] = product
            self.stdout.write(self.style.SUCCESS(f"  Created: {product.name}"))

        # Featured collection
        self.stdout.write("\nCreating collection...")
        collection_data = dict(COLLECTION)
        product_names = collection_data.pop("products")
        existing = Collection.objects.filter(name=collection_data["name"]).first()
        if existing and options["force"]:
            services.delete_collection(existing)
            existing = None
        if existing:
            self.stdout.write(f"  Skipping existing collection: {existing.name}")
        else:
            collection = services.create_collection(
                product_ids=[product_map[name].pk for name in product_names if name in product_map],
                **collection_data,
            )
            self.stdout.write(self.style.SUCCESS(f"  Created: {collection.name}"))

        self.stdout.write(self.style.SUCCESS("\nStore seed complete!"))
        self.stdout.write(f"  Categories: {len(CATEGORIES)}")
        self.stdout.write(f"  Products: {len(PRODUCTS)}")
