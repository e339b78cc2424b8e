"""
WhatsApp Observer — Notifica o cliente via WhatsApp a cada evento de agendamento.
"""

from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import Future
from typing import Any

from barbearia.exceptions import GatewayNotFound
from barbearia.observers.events import (
    AppointmentCanceled,
    AppointmentConfirmed,
    AppointmentCreated,
    AppointmentEvent,
    AppointmentRescheduled,
    StatusTransition,
)

from .protocols import MessagingGateway

logger = logging.getLogger(__name__)


class WhatsAppNotificacaoObserver:
    """
    Observer que envia WhatsApp para eventos de agendamento.

    Implementa tanto o contrato simples (StatusObserver) quanto o
    detalhado (AppointmentEventObserver). O envio é fire-and-forget:
    falhas de entrega são apenas logadas.

    Args:
        gateway: Gateway de mensagens (default: get_gateway() na primeira mensagem)
    """

    # Templates de mensagem por evento
    MESSAGE_TEMPLATES = {
        "created": (
            "Olá {customer_name}! 🎉\n\n"
            "Seu agendamento foi criado com sucesso!\n\n"
            "📅 Serviço: {service_name}\n"
            "📆 Data/Hora: {scheduled_at}\n"
            "🏪 Barbearia: {shop_name}\n\n"
            "Aguarde a confirmação da barbearia. Você será notificado quando seu horário for confirmado!\n\n"
            "Qualquer dúvida, entre em contato conosco."
        ),
        "confirmed": (
            "Olá {customer_name}! ✅\n\n"
            "Seu agendamento foi CONFIRMADO!\n\n"
            "✂️ Serviço: {service_name}\n"
            "📆 Data/Hora: {scheduled_at}\n"
            "🏪 Barbearia: {shop_name}\n\n"
            "Estamos te esperando! Chegue alguns minutos antes para ser atendido no horário marcado.\n\n"
            "Até logo! 💇‍♂️"
        ),
        "canceled": (
            "Olá {customer_name}! ❌\n\n"
            "Infelizmente seu agendamento foi CANCELADO.\n\n"
            "✂️ Serviço: {service_name}\n"
            "📆 Data/Hora: {scheduled_at}\n"
            "🏪 Barbearia: {shop_name}{reason_line}\n\n"
            "Entre em contato conosco para reagendar seu atendimento.\n\n"
            "Desculpe pelo inconveniente!"
        ),
        "rescheduled": (
            "Olá {customer_name}! 🔄\n\n"
            "Seu agendamento foi REAGENDADO!\n\n"
            "✂️ Serviço: {service_name}\n"
            "📆 De: {old_scheduled_at}\n"
            "📆 Para: {new_scheduled_at}\n"
            "🏪 Barbearia: {shop_name}\n\n"
            "Seu novo horário foi confirmado. Estamos te esperando!\n\n"
            "Qualquer dúvida, entre em contato conosco."
        ),
    }

    def __init__(self, gateway: MessagingGateway | None = None):
        self._gateway = gateway

    @property
    def gateway(self) -> MessagingGateway:
        if self._gateway is None:
            from .service import get_gateway

            gateway = get_gateway()
            if gateway is None:
                raise GatewayNotFound(
                    code="gateway_not_found",
                    message="Nenhum gateway de mensagens configurado",
                )
            self._gateway = gateway
        return self._gateway

    # -------------------------------------------------------------------------
    # StatusObserver
    # -------------------------------------------------------------------------

    def on_status_changed(self, transition: StatusTransition) -> None:
        # Sem dados do cliente aqui: a mensagem sai pelos eventos detalhados
        logger.info(
            f"Mudança de status detectada - Agendamento: {transition.appointment_id}, "
            f"De: {transition.previous_status} Para: {transition.new_status}"
        )

    # -------------------------------------------------------------------------
    # AppointmentEventObserver
    # -------------------------------------------------------------------------

    def on_created(self, event: AppointmentCreated) -> None:
        self._send(event)

    def on_confirmed(self, event: AppointmentConfirmed) -> None:
        self._send(event)

    def on_canceled(self, event: AppointmentCanceled) -> None:
        self._send(event)

    def on_rescheduled(self, event: AppointmentRescheduled) -> None:
        self._send(event)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def build_message(self, event: AppointmentEvent) -> str:
        """Monta a mensagem do evento a partir do template."""
        context: dict[str, Any] = dataclasses.asdict(event)
        reason = context.get("reason")
        context["reason_line"] = f"\n📝 Motivo: {reason}" if reason else ""
        return self.MESSAGE_TEMPLATES[event.kind].format(**context)

    def _send(self, event: AppointmentEvent) -> None:
        message = self.build_message(event)

        logger.info(
            f"Enviando notificação de agendamento {event.kind} para {event.customer_phone} "
            f"- Agendamento: {event.appointment_id}"
        )

        future = self.gateway.send_whatsapp(event.customer_phone, message)
        future.add_done_callback(lambda f: self._log_outcome(event, f))

    @staticmethod
    def _log_outcome(event: AppointmentEvent, future: Future) -> None:
        if future.cancelled():
            logger.warning(f"Envio cancelado ({event.kind}) - Agendamento: {event.appointment_id}")
            return

        error = future.exception()
        if error is not None:
            logger.error(f"Falha ao enviar notificação de agendamento {event.kind}: {error}")
