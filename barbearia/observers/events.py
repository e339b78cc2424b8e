"""
Eventos do ciclo de vida do agendamento.

Eventos são transitórios: criados a cada transição, consumidos pelo
fan-out e descartados. Não há persistência.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StatusTransition:
    """Mudança de status genérica (contrato simples)."""

    appointment_id: Any
    previous_status: str
    new_status: str
    customer_id: Any
    shop_id: Any


@dataclass(frozen=True)
class AppointmentEvent:
    """Dados comuns a todos os eventos detalhados."""

    appointment_id: Any
    customer_name: str
    customer_phone: str
    service_name: str
    shop_name: str

    kind = "appointment"

    def __post_init__(self) -> None:
        # Sem telefone não há destino para a mensagem
        if not self.customer_phone or not str(self.customer_phone).strip():
            raise ValueError(f"{type(self).__name__} requires customer_phone")


@dataclass(frozen=True)
class AppointmentCreated(AppointmentEvent):
    scheduled_at: str = ""

    kind = "created"


@dataclass(frozen=True)
class AppointmentConfirmed(AppointmentEvent):
    scheduled_at: str = ""

    kind = "confirmed"


@dataclass(frozen=True)
class AppointmentCanceled(AppointmentEvent):
    scheduled_at: str = ""
    reason: str | None = None

    kind = "canceled"


@dataclass(frozen=True)
class AppointmentRescheduled(AppointmentEvent):
    old_scheduled_at: str = ""
    new_scheduled_at: str = ""

    kind = "rescheduled"
