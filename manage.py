#!/usr/bin/env python
"""
thermostatd - Django Management Script

Django's command-line utility for administrative tasks such as
running the development server and checking the configuration.

License:    Academic Use Only - See LICENSE file

Usage:
    python manage.py runserver 0.0.0.0:8080
    python manage.py check
    THERMOSTATD_TRANSPORT=log python manage.py runserver
"""
import os
import sys


def main():
    """Run administrative tasks."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
