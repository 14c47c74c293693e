"""
Django settings for the dispatchdesk backend.

Everything environment specific is read from the process environment,
optionally seeded from a .env file at the repository root.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR.parent / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-dispatchdesk-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = [host.strip() for host in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",") if host.strip()]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "logistics",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "dispatchdesk_backend.urls"
WSGI_APPLICATION = "dispatchdesk_backend.wsgi.application"

# Routes are /order and /orders, no trailing slash
APPEND_SLASH = False

# Order store: status transitions give up after this long
ORDER_TRANSITION_TIMEOUT_MS = int(os.getenv("ORDER_TRANSITION_TIMEOUT_MS", "2000"))

# Postgres when a host is configured, SQLite otherwise (local dev, tests)
if os.getenv("ORDERS_POSTGRES_HOST"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "HOST": os.getenv("ORDERS_POSTGRES_HOST"),
            "PORT": os.getenv("ORDERS_POSTGRES_PORT", "5432"),
            "NAME": os.getenv("ORDERS_POSTGRES_DB", "postgres"),
            "USER": os.getenv("ORDERS_POSTGRES_USER", "postgres"),
            "PASSWORD": os.getenv("ORDERS_POSTGRES_PASSWORD", "password"),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.getenv("ORDERS_SQLITE_PATH", str(BASE_DIR / "db.sqlite3")),
            # SQLite has no row locks: take the write lock at BEGIN so
            # concurrent status updates queue up instead of erroring out. The
            # wait for that lock is bounded by the transition deadline.
            "OPTIONS": {
                "transaction_mode": "IMMEDIATE",
                "timeout": ORDER_TRANSITION_TIMEOUT_MS / 1000,
            },
            # a file, not :memory:, so that threads share the test database
            "TEST": {"NAME": str(BASE_DIR / "test_db.sqlite3")},
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "logistics.exceptions.api_exception_handler",
}

# Distance provider
OSRM_BASE_URL = os.getenv("OSRM_BASE_URL", "http://router.project-osrm.org")
OSRM_PROFILE = os.getenv("OSRM_PROFILE", "driving")
OSRM_TIMEOUT = float(os.getenv("OSRM_TIMEOUT", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "loggers": {
        name: {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False}
        for name in ("orders", "routing", "dispatch", "logistics")
    },
}
