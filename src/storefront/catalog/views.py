"""Public storefront views."""

from django.http import Http404, JsonResponse
from django.views.generic import DetailView, ListView, TemplateView

from storefront.core.templatetags.storefront_tags import money

from . import services


class HomeView(TemplateView):
    """Home page with the offer carousel and newest products."""

    template_name = "catalog/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            "special_offers": services.get_special_offers(),
            "homepage_products": services.get_homepage_products(),
            "featured_collection": services.get_featured_collection(),
            "categories": services.get_categories(),
        })
        return context


class ProductListView(ListView):
    """All active products, optionally filtered with ``?category=<slug>``."""

    template_name = "catalog/product_list.html"
    context_object_name = "products"
    paginate_by = 24

    def get_category(self):
        slug = self.kwargs.get("slug") or self.request.GET.get("category")
        if not slug:
            return None
        category = services.get_category_by_slug(slug)
        if category is None:
            raise Http404("Category not found")
        return category

    def get_queryset(self):
        self.category = self.get_category()
        return services.get_products(category=self.category)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["categories"] = services.get_categories()
        context["current_category"] = self.category
        return context


class CategoryView(ProductListView):
    template_name = "catalog/category.html"


class ProductDetailView(DetailView):
    template_name = "catalog/product_detail.html"
    context_object_name = "product"

    def get_object(self, queryset=None):
        product = services.get_product_by_slug(self.kwargs["slug"])
        if product is None:
            raise Http404("Product not found")
        return product

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["collections"] = services.get_collections_for_product(self.object)
        return context


class CollectionDetailView(DetailView):
    template_name = "catalog/collection_detail.html"
    context_object_name = "collection"

    def get_object(self, queryset=None):
        collection = services.get_collection_by_slug(self.kwargs["slug"])
        if collection is None:
            raise Http404("Collection not found")
        return collection

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["products"] = services.get_products_in_collection(self.object)
        return context


def product_search(request):
    """Search endpoint used by the navbar search box.

    GET /search/?q=hoodie
    """
    results = [
        {
            "id": product.pk,
            "name": product.name,
            "slug": product.slug,
            "price": str(product.price),
            "price_display": money(product.price),
            "image_url": product.image_url,
            "url": product.get_absolute_url(),
        }
        for product in services.search_products(request.GET.get("q", ""))
    ]
    return JsonResponse({"results": results})
