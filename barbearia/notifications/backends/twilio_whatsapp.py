"""
Twilio WhatsApp Gateway — Envio de WhatsApp via Twilio.

Requer: pip install twilio

O envio roda em background (ThreadPoolExecutor) com até MAX_RETRIES
tentativas e espera linear entre elas (1s, 2s com o delay padrão).
"""

from __future__ import annotations

import logging
import re
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from barbearia.conf import get_barbearia_setting
from barbearia.exceptions import NotificationError
from barbearia.notifications.protocols import NotificationResult

logger = logging.getLogger(__name__)

CHANNEL_PREFIX = "whatsapp:"
DEFAULT_FROM_NUMBER = "+14155238886"

_NON_DIGITS = re.compile(r"[^0-9]")


def format_whatsapp_number(phone_number: str, country_code: str = "55") -> str:
    """
    Normaliza o número para o padrão WhatsApp.

    Remove tudo que não é dígito ASCII (0-9) e, se o número não começa
    com o código do país, assume Brasil (+55).

    Raises:
        ValueError: Se o número for None
    """
    if phone_number is None:
        raise ValueError("Número de destino não pode ser nulo")

    digits = _NON_DIGITS.sub("", phone_number)
    if not digits.startswith(country_code):
        digits = country_code + digits

    logger.debug(f"Número formatado de '{phone_number}' para '{digits}'")
    return digits


class TwilioWhatsAppGateway:
    """
    Gateway de WhatsApp via Twilio.

    Args:
        account_sid: Twilio Account SID
        auth_token: Twilio Auth Token
        from_number: Número de origem (formato E.164: +14155238886)
        enabled: Se False, o envio é apenas simulado (log)
        retry_delay: Unidade de espera entre tentativas, em segundos
        max_workers: Threads do executor de background
        country_code: Código do país assumido para números sem DDI
        client: Cliente Twilio já construído (default: criado sob demanda)

    Example:
        gateway = TwilioWhatsAppGateway(
            account_sid="ACxxxxx",
            auth_token="xxxxx",
        )
        future = gateway.send_whatsapp("+5511999999999", "Olá!")

    Configuração via settings:
        BARBEARIA = {
            "TWILIO_ACCOUNT_SID": os.environ["TWILIO_ACCOUNT_SID"],
            "TWILIO_AUTH_TOKEN": os.environ["TWILIO_AUTH_TOKEN"],
            "TWILIO_WHATSAPP_FROM": "+14155238886",
            "NOTIFICATIONS_ENABLED": True,
        }
    """

    MAX_RETRIES = 3

    def __init__(
        self,
        account_sid: str | None = "",
        auth_token: str | None = "",
        from_number: str = DEFAULT_FROM_NUMBER,
        *,
        enabled: bool = True,
        retry_delay: float = 1.0,
        max_workers: int = 4,
        country_code: str = "55",
        client: Any = None,
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number or DEFAULT_FROM_NUMBER
        self.enabled = enabled
        self.retry_delay = retry_delay
        self.country_code = country_code
        self._client = client
        self._client_lock = threading.Lock()
        self._interrupted = threading.Event()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="whatsapp",
        )

    @classmethod
    def from_settings(cls) -> TwilioWhatsAppGateway:
        """Constrói o gateway a partir de settings.BARBEARIA."""
        return cls(
            account_sid=get_barbearia_setting("TWILIO_ACCOUNT_SID"),
            auth_token=get_barbearia_setting("TWILIO_AUTH_TOKEN"),
            from_number=get_barbearia_setting("TWILIO_WHATSAPP_FROM"),
            enabled=bool(get_barbearia_setting("NOTIFICATIONS_ENABLED")),
            retry_delay=float(get_barbearia_setting("NOTIFICATIONS_RETRY_DELAY")),
            max_workers=int(get_barbearia_setting("NOTIFICATIONS_MAX_WORKERS")),
            country_code=get_barbearia_setting("DEFAULT_COUNTRY_CODE"),
        )

    def is_available(self) -> bool:
        return bool(self.account_sid) and bool(self.auth_token) and self.enabled

    def send_whatsapp(self, phone_number: str, message: str) -> Future:
        """
        Agenda o envio em background.

        Returns:
            Future com NotificationResult; falha com NotificationError
            quando as tentativas se esgotam ou o gateway é interrompido
        """
        return self._executor.submit(self._deliver, phone_number, message)

    @property
    def closed(self) -> bool:
        """True depois de shutdown(); o gateway não aceita novos envios."""
        return self._interrupted.is_set()

    def shutdown(self, wait: bool = True) -> None:
        """
        Encerra o executor. Envios aguardando nova tentativa são
        interrompidos e falham com code="interrupted".
        """
        self._interrupted.set()
        self._executor.shutdown(wait=wait)

    def _deliver(self, phone_number: str, message: str) -> NotificationResult:
        if not self.enabled:
            logger.info(f"Notificações desabilitadas. Simulando envio para {phone_number}: {message}")
            return NotificationResult(success=True, skipped=True)

        if not self.is_available():
            logger.warning("Serviço Twilio não disponível. Credenciais não configuradas.")
            return NotificationResult(success=True, skipped=True)

        number = format_whatsapp_number(phone_number, self.country_code)

        for attempt in range(1, self.MAX_RETRIES + 1):
            try:
                logger.info(f"Tentativa {attempt} de {self.MAX_RETRIES} para enviar WhatsApp para {number}")
                message_id = self._create_message(number, message)
                logger.info(f"WhatsApp enviado com sucesso. SID: {message_id}")
                return NotificationResult(success=True, message_id=message_id)

            except Exception as e:
                logger.error(f"Erro ao enviar WhatsApp na tentativa {attempt}: {e}")

                if attempt == self.MAX_RETRIES:
                    logger.error(
                        f"Falha definitiva ao enviar WhatsApp para {number} "
                        f"após {self.MAX_RETRIES} tentativas"
                    )
                    raise NotificationError(
                        code="delivery_failed",
                        message="Falha ao enviar notificação WhatsApp",
                        context={"phone_number": number, "attempts": attempt, "error": str(e)},
                    ) from e

                if not self._wait(self.retry_delay * attempt):
                    raise NotificationError(
                        code="interrupted",
                        message="Envio interrompido durante retry",
                        context={"phone_number": number, "attempts": attempt},
                    ) from e

    def _wait(self, seconds: float) -> bool:
        """Espera entre tentativas. Retorna False se o gateway foi interrompido."""
        return not self._interrupted.wait(seconds)

    def _create_message(self, number: str, message: str) -> str:
        """Uma chamada ao provider. Retorna o SID da mensagem."""
        created = self._get_client().messages.create(
            to=f"{CHANNEL_PREFIX}+{number}",
            from_=f"{CHANNEL_PREFIX}{self.from_number}",
            body=message,
        )
        return created.sid

    def _get_client(self) -> Any:
        with self._client_lock:
            if self._client is None:
                try:
                    from twilio.rest import Client
                except ImportError:
                    raise ImportError(
                        "Twilio não instalado. Execute: pip install twilio"
                    )

                self._client = Client(self.account_sid, self.auth_token)
                logger.info("Twilio SDK inicializado com sucesso")
            return self._client
