"""Context processors for the Storefront."""

from django.urls import NoReverseMatch, reverse

from . import conf
from .models import SiteSettings


def resolve_nav_url(item):
    """Resolve a navigation item URL from a URL name or a path."""
    url = item.get("url", "")

    if not url:
        return "#"

    if url.startswith("/") or url.startswith("http"):
        return url

    try:
        return reverse(url)
    except NoReverseMatch:
        return url


def _matches(path, url):
    if url == "/":
        return path == "/"
    return path == url or (url.startswith("/") and path.startswith(url))


def build_navigation(items, request):
    """Resolve URLs and mark the active item.

    When several items match the current path, the most specific (longest
    URL) wins, so ``/staff/orders/`` activates Orders and not Dashboard.
    """
    navigation = []
    for item in items:
        nav_item = item.copy()
        nav_item["resolved_url"] = resolve_nav_url(item)
        nav_item["is_active"] = False
        navigation.append(nav_item)

    matching = [item for item in navigation if _matches(request.path, item["resolved_url"])]
    if matching:
        max(matching, key=lambda item: len(item["resolved_url"]))["is_active"] = True
    return navigation


def group_nav_by_section(items):
    """Group navigation items by section."""
    sections = {}
    for item in items:
        sections.setdefault(item.get("section", "Main"), []).append(item)
    return sections


def storefront_context(request):
    """Add site branding and navigation to templates."""
    config = conf.get_config()
    is_staff_area = request.path.startswith(config["STAFF_PREFIX"])
    items = config["STAFF_NAV"] if is_staff_area else config["PUBLIC_NAV"]
    navigation = build_navigation(items, request)

    return {
        "storefront": {
            "site_name": config["SITE_NAME"],
            "site_settings": SiteSettings.load(),
            "currency": config["CURRENCY"],
            "currency_symbol": config["CURRENCY_SYMBOL"],
            "is_staff_area": is_staff_area,
            "navigation": navigation,
            "nav_sections": group_nav_by_section(navigation),
        }
    }
