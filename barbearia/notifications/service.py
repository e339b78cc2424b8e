"""
Barbearia Notifications Service — Registro de gateways de mensagens.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Callable

from barbearia.conf import get_barbearia_setting
from barbearia.exceptions import GatewayNotFound

from .backends import ConsoleGateway, TwilioWhatsAppGateway
from .protocols import MessagingGateway

logger = logging.getLogger(__name__)

# Gateways construídos sob demanda a partir das settings
GATEWAY_FACTORIES: dict[str, Callable[[], MessagingGateway]] = {
    "twilio": TwilioWhatsAppGateway.from_settings,
    "console": ConsoleGateway,
}

_gateways: dict[str, MessagingGateway] = {}
_lock = threading.Lock()


def register_gateway(name: str, gateway: MessagingGateway) -> None:
    """
    Registra um gateway de mensagens.

    Args:
        name: Nome do gateway (ex: "twilio", "console")
        gateway: Instância do gateway
    """
    with _lock:
        _gateways[name] = gateway
    logger.debug(f"Messaging gateway registered: {name}")


def get_gateway(name: str | None = None) -> MessagingGateway | None:
    """
    Retorna gateway por nome ou o default.

    Gateways conhecidos ("twilio", "console") são construídos na primeira
    chamada e reutilizados depois. Um gateway encerrado (shutdown) sai do
    registro: os conhecidos são reconstruídos, os demais deixam de existir.

    Args:
        name: Nome do gateway (None = usa DEFAULT_GATEWAY das settings)

    Returns:
        Gateway ou None se não encontrado
    """
    if name is None:
        name = get_barbearia_setting("DEFAULT_GATEWAY")

    with _lock:
        gateway = _gateways.get(name)
        if gateway is not None and getattr(gateway, "closed", False) is True:
            logger.debug(f"Messaging gateway closed, dropping: {name}")
            del _gateways[name]
            gateway = None
        if gateway is None and name in GATEWAY_FACTORIES:
            gateway = GATEWAY_FACTORIES[name]()
            _gateways[name] = gateway
        return gateway


def send_whatsapp(phone_number: str, message: str, gateway: str | None = None) -> Future:
    """
    Envia WhatsApp pelo gateway informado (ou o default).

    Raises:
        GatewayNotFound: Se o gateway não está registrado

    Example:
        future = send_whatsapp("+5511999999999", "Seu horário foi confirmado!")
        result = future.result(timeout=30)
    """
    gateway_instance = get_gateway(gateway)

    if gateway_instance is None:
        gateway_name = gateway or "default"
        logger.warning(f"Messaging gateway not found: {gateway_name}")
        raise GatewayNotFound(
            code="gateway_not_found",
            message=f"Gateway not found: {gateway_name}",
            context={"gateway": gateway_name},
        )

    return gateway_instance.send_whatsapp(phone_number, message)


def clear() -> None:
    """Limpa os gateways registrados. Útil para testes."""
    with _lock:
        _gateways.clear()
