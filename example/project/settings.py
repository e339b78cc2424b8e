"""
Django settings for the Barbearia example project.

This is a minimal working example that demonstrates how to plug
django-barbearia into a Django project. It also serves as the test settings.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = "example-secret-key-change-in-production"

DEBUG = True

ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    # Django contrib
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Barbearia core
    "barbearia",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "pt-br"
TIME_ZONE = "America/Sao_Paulo"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Barbearia
BARBEARIA = {
    "DEFAULT_GATEWAY": os.environ.get("BARBEARIA_GATEWAY", "console"),
    "TWILIO_ACCOUNT_SID": os.environ.get("TWILIO_ACCOUNT_SID", ""),
    "TWILIO_AUTH_TOKEN": os.environ.get("TWILIO_AUTH_TOKEN", ""),
    "TWILIO_WHATSAPP_FROM": os.environ.get("TWILIO_WHATSAPP_FROM", "+14155238886"),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "barbearia": {
            "handlers": ["console"],
            "level": os.environ.get("BARBEARIA_LOG_LEVEL", "INFO"),
        },
    },
}
