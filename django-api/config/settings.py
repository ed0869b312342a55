"""Django settings for the event reminders service.

Values come from environment variables with development defaults.
"""

import os
from pathlib import Path

from events.logging import configure_logging

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {"1", "true", "yes", "on"}


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-development-key")
DEBUG = _env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [host for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if host]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "events",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "config.urls"

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

DATABASES = {
    "default": {
        "ENGINE": os.getenv("DATABASE_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.getenv("DATABASE_NAME", str(BASE_DIR / "db.sqlite3")),
        "USER": os.getenv("DATABASE_USER", ""),
        "PASSWORD": os.getenv("DATABASE_PASSWORD", ""),
        "HOST": os.getenv("DATABASE_HOST", ""),
        "PORT": os.getenv("DATABASE_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.getenv("TIME_ZONE", "America/Sao_Paulo")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

REMINDERS = {
    "VERIFICATION_WINDOW_HOURS": float(os.getenv("VERIFICATION_WINDOW_HOURS", "24")),
    "DEFAULT_HOURS_AHEAD": float(os.getenv("REMINDER_HOURS_AHEAD", "24")),
    "REMINDER_WINDOW_MINUTES": int(os.getenv("REMINDER_WINDOW_MINUTES", "60")),
    "SCHEDULER_INTERVAL_SECONDS": int(os.getenv("REMINDER_SCHEDULER_INTERVAL_SECONDS", "3600")),
    "SCHEDULER_POLL_SECONDS": int(os.getenv("REMINDER_SCHEDULER_POLL_SECONDS", "60")),
    "SCHEDULER_MAX_CONCURRENCY": int(os.getenv("REMINDER_SCHEDULER_MAX_CONCURRENCY", "2")),
    "SCHEDULER_RUN_ON_START": _env_bool("REMINDER_SCHEDULER_RUN_ON_START", False),
    "DEFAULT_COUNTRY_CODE": os.getenv("PHONE_DEFAULT_COUNTRY_CODE", "55"),
}

TWILIO = {
    "ACCOUNT_SID": os.getenv("TWILIO_ACCOUNT_SID"),
    "AUTH_TOKEN": os.getenv("TWILIO_AUTH_TOKEN"),
    "WHATSAPP_FROM": os.getenv("TWILIO_WHATSAPP_FROM"),
}

configure_logging(os.getenv("LOG_LEVEL", "INFO"), json=_env_bool("LOG_JSON", not DEBUG))
