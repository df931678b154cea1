"""
thermostatd - Root URL Configuration

This module defines the root URL routing for the Django project:
    - /health - Health check endpoint
    - /v1/... - Thermostat API (see apps.api.urls)

License:    Academic Use Only - See LICENSE file

For URL routing reference:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.urls import path, include
from .views import health


urlpatterns = [
    path("health", health, name="health"),
    path("", include("apps.api.urls")),
]
