"""
Console Gateway — Log no console (desenvolvimento/debug).
"""

from __future__ import annotations

import logging
from concurrent.futures import Future

from barbearia.notifications.protocols import NotificationResult

logger = logging.getLogger(__name__)


class ConsoleGateway:
    """
    Gateway que loga mensagens no console em vez de enviá-las.

    Útil para desenvolvimento e testes.
    """

    def send_whatsapp(self, phone_number: str, message: str) -> Future:
        """Loga a mensagem e devolve um Future já concluído."""
        logger.info(
            f"\n{'='*50}\n"
            f"WHATSAPP\n"
            f"To: {phone_number}\n"
            f"{message}\n"
            f"{'='*50}"
        )

        future: Future = Future()
        future.set_result(
            NotificationResult(
                success=True,
                message_id=f"console_{id(self)}",
            )
        )
        return future

    def is_available(self) -> bool:
        return True
