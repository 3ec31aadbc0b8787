"""Core views for the Storefront."""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.shortcuts import render

logger = logging.getLogger(__name__)


def health_check(request):
    """Health check endpoint for container orchestration."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")

        return JsonResponse({"status": "healthy", "database": "connected"})
    except DatabaseError as e:
        logger.error("Health check failed: %s", e)
        return JsonResponse(
            {"status": "unhealthy", "error": str(e)},
            status=503,
        )


def page_not_found(request, exception):
    return render(request, "404.html", status=404)
