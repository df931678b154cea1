"""
thermostatd - Root Views

This module provides root-level views for the Django project.

License:    Academic Use Only - See LICENSE file
"""

from django.http import JsonResponse


def health(request):
    """
    Health check endpoint for process supervisors and monitoring.

    Exempt from token authentication; it reveals nothing about the unit.

    Returns:
        JsonResponse: Status OK with message.
    """
    return JsonResponse(
        {
            "status": "ok",
            "message": "thermostatd alive",
        }
    )
