"""Production settings."""

from __future__ import annotations

import sys

import dj_database_url
from decouple import config

from .base import *  # noqa
from .base import APP_LOG_LEVEL, DJANGO_LOG_LEVEL, LOGGING

DEBUG = False
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = config("SECURE_SSL_REDIRECT", default=True, cast=bool)
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# Trust X-Forwarded-Proto header from the hosting system's reverse proxy
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

database_url = config("DATABASE_URL", default="")
if not database_url:
    print("ERROR: DATABASE_URL is not set.", file=sys.stderr)
    sys.exit(1)

DATABASES = {
    "default": dj_database_url.parse(  # type: ignore[dict-item]
        database_url,
        conn_max_age=600,
        conn_health_checks=True,
    )
}

# Whitenoise for static file serving
INSTALLED_APPS = ["whitenoise.runserver_nostatic", *INSTALLED_APPS]  # noqa: F405
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")  # noqa: F405
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

LOGGING["loggers"]["gridwork"]["level"] = config(  # type: ignore[index]
    "WEB_LOG_LEVEL",
    default=APP_LOG_LEVEL,
).upper()
LOGGING["loggers"]["django.request"]["level"] = config(  # type: ignore[index]
    "WEB_DJANGO_LOG_LEVEL",
    default=DJANGO_LOG_LEVEL,
).upper()
LOGGING["loggers"]["django.server"]["level"] = LOGGING["loggers"]["django.request"]["level"]  # type: ignore[index]
