"""
Django settings for careclock project.

Values come from environment variables; a `.env` file next to manage.py is
loaded first when present.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "t", "yes", "y")


def _env_list(name: str, default: str = "") -> list:
    return [x.strip() for x in os.environ.get(name, default).split(",") if x.strip()]


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-careclock-dev-key")
DEBUG = _env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = _env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "timeclock",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "careclock.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "careclock.wsgi.application"

# Database
DATABASES = {
    "default": {
        "ENGINE": os.environ.get("DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("DB_NAME", str(BASE_DIR / "db.sqlite3")),
        "USER": os.environ.get("DB_USER", ""),
        "PASSWORD": os.environ.get("DB_PASSWORD", ""),
        "HOST": os.environ.get("DB_HOST", ""),
        "PORT": os.environ.get("DB_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("DJANGO_TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# REST framework
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "timeclock.authentication.IdentityProviderAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "timeclock.exceptions.exception_handler",
    "UNAUTHENTICATED_USER": "django.contrib.auth.models.AnonymousUser",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "CareClock API",
    "DESCRIPTION": "Geofenced clock-in/out for healthcare staff",
    "VERSION": "0.1.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

# Identity provider (bearer JWTs issued by the IdP)
TIMECLOCK_IDP_ALGORITHMS = _env_list("TIMECLOCK_IDP_ALGORITHMS", "HS256")
TIMECLOCK_IDP_SECRET = os.environ.get("TIMECLOCK_IDP_SECRET", "")
TIMECLOCK_IDP_PUBLIC_KEY = os.environ.get("TIMECLOCK_IDP_PUBLIC_KEY", "")
TIMECLOCK_IDP_JWKS_URL = os.environ.get("TIMECLOCK_IDP_JWKS_URL", "")
TIMECLOCK_IDP_AUDIENCE = os.environ.get("TIMECLOCK_IDP_AUDIENCE") or None
TIMECLOCK_IDP_ISSUER = os.environ.get("TIMECLOCK_IDP_ISSUER") or None
TIMECLOCK_IDP_ROLES_CLAIM = os.environ.get("TIMECLOCK_IDP_ROLES_CLAIM", "roles")
TIMECLOCK_MANAGER_ROLES = _env_list("TIMECLOCK_MANAGER_ROLES", "manager,admin")

# Clocking rules
TIMECLOCK_ENFORCE_CLOCK_OUT_PERIMETER = _env_bool("TIMECLOCK_ENFORCE_CLOCK_OUT_PERIMETER", False)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "timeclock": {
            "handlers": ["console"],
            "level": os.environ.get("TIMECLOCK_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
