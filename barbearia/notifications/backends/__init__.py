"""
Messaging Gateways — Implementações prontas para uso.

- ConsoleGateway: Log no console (dev)
- TwilioWhatsAppGateway: WhatsApp via Twilio (configure com suas credenciais)
"""

from .console import ConsoleGateway
from .twilio_whatsapp import TwilioWhatsAppGateway, format_whatsapp_number

__all__ = [
    "ConsoleGateway",
    "TwilioWhatsAppGateway",
    "format_whatsapp_number",
]
