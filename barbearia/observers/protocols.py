"""
Barbearia Observer Protocols — Contratos para ouvintes de agendamento.

Dois níveis de detalhe:
- StatusObserver: recebe apenas a transição (ids e status)
- AppointmentEventObserver: um método por tipo de evento, com dados completos
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .events import (
    AppointmentCanceled,
    AppointmentConfirmed,
    AppointmentCreated,
    AppointmentRescheduled,
    StatusTransition,
)


@runtime_checkable
class StatusObserver(Protocol):
    """
    Ouvinte genérico de mudança de status.

    Útil para listeners que só precisam saber que algo mudou
    (auditoria, métricas, etc).
    """

    def on_status_changed(self, transition: StatusTransition) -> None:
        ...


@runtime_checkable
class AppointmentEventObserver(Protocol):
    """
    Ouvinte detalhado de eventos de agendamento.

    Implemente este protocol para enviar email, SMS, WhatsApp, push, etc.
    """

    def on_created(self, event: AppointmentCreated) -> None:
        ...

    def on_confirmed(self, event: AppointmentConfirmed) -> None:
        ...

    def on_canceled(self, event: AppointmentCanceled) -> None:
        ...

    def on_rescheduled(self, event: AppointmentRescheduled) -> None:
        ...
