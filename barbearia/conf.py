from __future__ import annotations

import os

from django.conf import settings
from django.utils.module_loading import import_string


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


BARBEARIA_DEFAULTS = {
    "TWILIO_ACCOUNT_SID": os.environ.get("TWILIO_ACCOUNT_SID", ""),
    "TWILIO_AUTH_TOKEN": os.environ.get("TWILIO_AUTH_TOKEN", ""),
    "TWILIO_WHATSAPP_FROM": os.environ.get("TWILIO_WHATSAPP_FROM", "+14155238886"),
    "NOTIFICATIONS_ENABLED": _env_bool("TWILIO_ENABLED", True),
    "NOTIFICATIONS_MAX_WORKERS": 4,
    "NOTIFICATIONS_RETRY_DELAY": 1.0,
    "DEFAULT_GATEWAY": "twilio",
    "DEFAULT_COUNTRY_CODE": "55",
    "OBSERVERS": ["barbearia.notifications.observer.WhatsAppNotificacaoObserver"],
}


def get_barbearia_setting(key: str):
    """Retrieve a Barbearia setting, falling back to BARBEARIA_DEFAULTS."""
    user_settings = getattr(settings, "BARBEARIA", {})
    return user_settings.get(key, BARBEARIA_DEFAULTS.get(key))


def get_barbearia_classes(key: str) -> list:
    """Resolve a setting holding dotted paths into the classes they name."""
    value = get_barbearia_setting(key) or []
    return [import_string(path) if isinstance(path, str) else path for path in value]
