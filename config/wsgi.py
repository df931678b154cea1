"""
thermostatd - WSGI Configuration

WSGI (Web Server Gateway Interface) configuration for production deployment.
Exposes the WSGI callable as a module-level variable named 'application'.

Loading this module resets the thermostat, pushing the default state to
the unit, the same way it happens when the daemon boots.

License:    Academic Use Only - See LICENSE file

For WSGI deployment reference:
    https://docs.djangoproject.com/en/5.2/howto/deployment/wsgi/
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()

from apps.thermostat.runtime import start  # noqa: E402

start()
