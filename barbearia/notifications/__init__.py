"""
Barbearia Notifications — Envio de WhatsApp para eventos de agendamento.

Uso básico:
    from barbearia.notifications import send_whatsapp

    future = send_whatsapp("+5511999999999", "Seu horário foi confirmado!")

Gateways disponíveis:
    - twilio: WhatsApp via Twilio, com retry e envio em background
    - console: Log no console (desenvolvimento)

Configuração via settings.py:
    BARBEARIA = {
        "DEFAULT_GATEWAY": "twilio",
        "TWILIO_ACCOUNT_SID": os.environ["TWILIO_ACCOUNT_SID"],
        "TWILIO_AUTH_TOKEN": os.environ["TWILIO_AUTH_TOKEN"],
        "TWILIO_WHATSAPP_FROM": "+14155238886",
        "NOTIFICATIONS_ENABLED": True,
    }
"""

from .service import send_whatsapp, get_gateway, register_gateway
from .protocols import MessagingGateway, NotificationResult
from .observer import WhatsAppNotificacaoObserver

__all__ = [
    "send_whatsapp",
    "get_gateway",
    "register_gateway",
    "MessagingGateway",
    "NotificationResult",
    "WhatsAppNotificacaoObserver",
]
