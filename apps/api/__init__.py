"""
thermostatd - API Application

This Django application exposes the thermostat over HTTP: the v1 JSON
endpoints, bearer token authentication, and rate limiting.

License:    Academic Use Only - See LICENSE file
"""
