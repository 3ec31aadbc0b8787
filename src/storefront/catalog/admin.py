from django.contrib import admin

from .models import Category, Collection, Product, ProductImage


class ProductImageInline(admin.TabularInline):
    model = ProductImage
    extra = 0


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "is_active", "created_at"]
    list_filter = ["is_active"]
    prepopulated_fields = {"slug": ["name"]}


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "price", "quantity", "is_active", "is_temporary_offer", "sales_count"]
    list_filter = ["is_active", "is_temporary_offer", "category"]
    search_fields = ["name", "sku", "barcode"]
    prepopulated_fields = {"slug": ["name"]}
    inlines = [ProductImageInline]


@admin.register(Collection)
class CollectionAdmin(admin.ModelAdmin):
    list_display = ["name", "is_featured", "display_order"]
    filter_horizontal = ["products"]
