"""
thermostatd - Django Settings

All deployment-specific values are read from the environment so the same
code runs on the Raspberry Pi and in development:

    THERMOSTATD_TOKEN          bearer token; empty leaves the API open
    THERMOSTATD_TRANSPORT      "lirc" (default) or "log" for a dry run
    THERMOSTATD_LIRC_SOCKET    lircd socket path
    THERMOSTATD_LIRC_REMOTE    remote name in the lircd config
    THERMOSTATD_LCD_ENABLED    attach the 16x2 status LCD

License:    Academic Use Only - See LICENSE file

For the full list of settings and their values, see
    https://docs.djangoproject.com/en/5.2/ref/settings/
"""

import os
from pathlib import Path


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "y", "on")


def env_list(name, default=""):
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY",
    "django-insecure-thermostatd-development-key",
)

DEBUG = env_bool("DJANGO_DEBUG")

ALLOWED_HOSTS = env_list("DJANGO_ALLOWED_HOSTS", "*")


# Application definition

INSTALLED_APPS = [
    'django_ratelimit',
    'apps.thermostat',
    'apps.api',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'apps.api.middleware.BearerTokenMiddleware',
    'django_ratelimit.middleware.RatelimitMiddleware',
]

ROOT_URLCONF = 'config.urls'

WSGI_APPLICATION = 'config.wsgi.application'

# State lives in memory only
DATABASES = {}

# API paths have no trailing slash
APPEND_SLASH = False

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True


# Cache (used by django-ratelimit counters)

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}


# Thermostat

THERMOSTATD_TOKEN = os.environ.get("THERMOSTATD_TOKEN", "")
THERMOSTATD_AUTH_EXEMPT_PATHS = env_list("THERMOSTATD_AUTH_EXEMPT_PATHS", "/health")

THERMOSTATD_TRANSPORT = os.environ.get("THERMOSTATD_TRANSPORT", "lirc")
THERMOSTATD_LIRC_SOCKET = os.environ.get("THERMOSTATD_LIRC_SOCKET", "/var/run/lirc/lircd")
THERMOSTATD_LIRC_REMOTE = os.environ.get("THERMOSTATD_LIRC_REMOTE", "fujitsu_heat_ac")
THERMOSTATD_LIRC_TIMEOUT = float(os.environ.get("THERMOSTATD_LIRC_TIMEOUT", "5"))

# Seconds between the power-on key and the settings key
THERMOSTATD_SETTLE_DELAY = float(os.environ.get("THERMOSTATD_SETTLE_DELAY", "1.0"))

THERMOSTATD_LCD_ENABLED = env_bool("THERMOSTATD_LCD_ENABLED")
# RS, EN, D4, D5, D6, D7 (BCM numbering)
THERMOSTATD_LCD_PINS = [int(pin) for pin in env_list("THERMOSTATD_LCD_PINS", "21,20,19,13,26,6")]
THERMOSTATD_LCD_COLUMNS = int(os.environ.get("THERMOSTATD_LCD_COLUMNS", "16"))


# Rate limiting

RATELIMIT_ENABLE = env_bool("RATELIMIT_ENABLE", True)
RATELIMIT_COMMANDS = os.environ.get("RATELIMIT_COMMANDS", "30/m")
RATELIMIT_VIEW = 'apps.api.views.ratelimited_error'

# The local-memory cache is per process; fine for a single-process daemon
SILENCED_SYSTEM_CHECKS = ['django_ratelimit.E003', 'django_ratelimit.W001']


# Logging

LOG_LEVEL = os.environ.get("THERMOSTATD_LOG_LEVEL", "INFO").upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)-7s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'level': LOG_LEVEL,
        },
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
