"""Development settings."""

from __future__ import annotations

from copy import deepcopy

from .base import *  # noqa
from .base import LOGGING as BASE_LOGGING

LOGGING = deepcopy(BASE_LOGGING)

DEBUG = True

# Whitenoise for serving the app's static files (CSS, JS, etc)
INSTALLED_APPS = ["whitenoise.runserver_nostatic", *INSTALLED_APPS]  # noqa: F405
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")  # noqa: F405

# Development logging - more verbose, human-readable format with extras
LOGGING["handlers"]["console"]["formatter"] = "dev"
LOGGING["loggers"]["gridwork"]["level"] = "INFO"
LOGGING["loggers"]["django.request"]["level"] = "INFO"
LOGGING["loggers"]["django.server"]["level"] = "INFO"
