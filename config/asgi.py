"""
thermostatd - ASGI Configuration

ASGI (Asynchronous Server Gateway Interface) configuration for async deployment.
Exposes the ASGI callable as a module-level variable named 'application'.

Loading this module resets the thermostat, pushing the default state to
the unit. The v1 views are synchronous and run in Django's thread pool.

License:    Academic Use Only - See LICENSE file

For ASGI deployment reference:
    https://docs.djangoproject.com/en/5.2/howto/deployment/asgi/
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_asgi_application()

from apps.thermostat.runtime import start  # noqa: E402

start()
