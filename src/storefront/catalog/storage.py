"""Product image storage.

Images are written through Django's default storage under ``products/``.
The database keeps the public URL, so deletes map that URL back to a
storage path first.
"""

import logging
import os
import re
import time

from django.conf import settings
from django.core.files.storage import default_storage

logger = logging.getLogger(__name__)

UPLOAD_DIR = "products"


def build_image_name(filename, product_name, timestamp_ms=None):
    """Return ``products/<sanitised-name>-<ms>.<ext>`` for an upload."""
    ext = os.path.splitext(filename)[1].lstrip(".").lower() or "jpg"
    sanitized = re.sub(r"[^a-z0-9]", "-", product_name.lower())
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{UPLOAD_DIR}/{sanitized}-{timestamp_ms}.{ext}"


def upload_image(file, product_name):
    """Save an uploaded file and return its public URL, or None on failure."""
    name = build_image_name(file.name, product_name)
    try:
        saved_name = default_storage.save(name, file)
    except OSError:
        logger.exception("Upload error for %s", name)
        return None
    return default_storage.url(saved_name)


def path_from_url(url):
    """Map a public media URL back to its storage path.

    Returns None for URLs that do not point into our media storage,
    such as images hosted elsewhere.
    """
    if not url:
        return None
    marker = settings.MEDIA_URL
    if marker not in url:
        return None
    path = url.split(marker, 1)[1]
    return path or None


def delete_image(url):
    path = path_from_url(url)
    if path is None:
        logger.warning("Invalid image URL format: %s", url)
        return False
    try:
        default_storage.delete(path)
    except OSError:
        logger.exception("Error deleting image %s", path)
        return False
    return True


def delete_images(urls):
    """Delete every stored image in ``urls``; returns how many were removed."""
    deleted = 0
    for url in urls:
        if path_from_url(url) is not None and delete_image(url):
            deleted += 1
    return deleted
