"""
Barbearia Observers — Broadcast de eventos do ciclo de vida do agendamento.

Uso básico:
    from barbearia import observers
    from barbearia.observers import AppointmentConfirmed

    observers.register_observer(MeuObserver())
    observers.notify_event(
        AppointmentConfirmed(
            appointment_id=1,
            customer_name="João Silva",
            customer_phone="+5511999999999",
            service_name="Corte de Cabelo",
            scheduled_at="15/12/2024 às 14:00",
            shop_name="Barbearia do João",
        )
    )
"""

from .events import (
    AppointmentCanceled,
    AppointmentConfirmed,
    AppointmentCreated,
    AppointmentEvent,
    AppointmentRescheduled,
    StatusTransition,
)
from .protocols import AppointmentEventObserver, StatusObserver
from .registry import (
    clear,
    get_event_observers,
    get_status_observers,
    notify_event,
    notify_status_changed,
    publish_status_change,
    register_observer,
    unregister_observer,
)

__all__ = [
    "AppointmentCanceled",
    "AppointmentConfirmed",
    "AppointmentCreated",
    "AppointmentEvent",
    "AppointmentRescheduled",
    "StatusTransition",
    "AppointmentEventObserver",
    "StatusObserver",
    "clear",
    "get_event_observers",
    "get_status_observers",
    "notify_event",
    "notify_status_changed",
    "publish_status_change",
    "register_observer",
    "unregister_observer",
]
