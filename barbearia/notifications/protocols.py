"""
Barbearia Notifications Protocols — Interface para gateways de mensagens.
"""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass
class NotificationResult:
    """Resultado do envio."""

    success: bool
    message_id: str | None = None
    error: str | None = None
    skipped: bool = False  # Gateway desabilitado ou sem credenciais


@runtime_checkable
class MessagingGateway(Protocol):
    """
    Protocol para gateways de mensagens (WhatsApp).

    O envio acontece fora do fluxo de quem chama: send_whatsapp devolve
    um Future que pode ser ignorado ou observado com add_done_callback.
    """

    def send_whatsapp(self, phone_number: str, message: str) -> Future:
        """
        Envia uma mensagem de texto para um número WhatsApp.

        Args:
            phone_number: Número de destino (ex: +5511999999999)
            message: Conteúdo da mensagem

        Returns:
            Future resolvido com NotificationResult, ou com a exceção
            em caso de falha definitiva
        """
        ...

    def is_available(self) -> bool:
        """Verifica se o gateway está configurado e habilitado."""
        ...
