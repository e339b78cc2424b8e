"""
Django AppConfig para barbearia.
"""

import logging

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class BarbeariaConfig(AppConfig):
    name = "barbearia"
    label = "barbearia"
    verbose_name = _("Barbearia")

    def ready(self):
        """Registra os observers configurados em BARBEARIA["OBSERVERS"]."""
        from barbearia import observers
        from barbearia.conf import get_barbearia_classes

        registered = {
            type(o) for o in observers.get_status_observers() + observers.get_event_observers()
        }
        for observer_class in get_barbearia_classes("OBSERVERS"):
            if observer_class in registered:
                # Já registrado (pode acontecer em reloads)
                continue
            observers.register_observer(observer_class())
            logger.debug(f"Observer registered: {observer_class.__name__}")
