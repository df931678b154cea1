"""
thermostatd - API Application Configuration

Django application configuration for the API app.

License:    Academic Use Only - See LICENSE file
"""

from django.apps import AppConfig


class ApiConfig(AppConfig):
    name = 'apps.api'
    label = 'api'
