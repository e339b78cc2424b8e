"""
Barbearia Observer Registry — Registro e fan-out de eventos de agendamento.

Os ouvintes são chamados na ordem de registro. A falha de um ouvinte é
logada e não impede os demais nem chega a quem disparou o evento.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from .events import (
    AppointmentCanceled,
    AppointmentConfirmed,
    AppointmentCreated,
    AppointmentEvent,
    AppointmentRescheduled,
    StatusTransition,
)
from .protocols import AppointmentEventObserver, StatusObserver

logger = logging.getLogger(__name__)

# Evento detalhado -> método do AppointmentEventObserver
EVENT_METHODS = {
    AppointmentCreated: "on_created",
    AppointmentConfirmed: "on_confirmed",
    AppointmentCanceled: "on_canceled",
    AppointmentRescheduled: "on_rescheduled",
}


class _Registry:
    """
    Registro central de ouvintes de agendamento.

    Uso:
        from barbearia import observers

        observers.register_observer(MyObserver())
        observers.notify_event(AppointmentConfirmed(...))
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._status_observers: list[StatusObserver] = []
        self._event_observers: list[AppointmentEventObserver] = []

    # -------------------------------------------------------------------------
    # Registro
    # -------------------------------------------------------------------------

    def register_observer(self, observer: Any) -> None:
        """
        Registra um ouvinte em todos os contratos que ele implementa.

        Raises:
            TypeError: Se não implementa nenhum dos protocols
        """
        is_status = isinstance(observer, StatusObserver)
        is_event = isinstance(observer, AppointmentEventObserver)
        if not (is_status or is_event):
            raise TypeError(f"Expected StatusObserver or AppointmentEventObserver, got {type(observer)}")

        with self._lock:
            if is_status and observer not in self._status_observers:
                self._status_observers.append(observer)
            if is_event and observer not in self._event_observers:
                self._event_observers.append(observer)

    def unregister_observer(self, observer: Any) -> None:
        """Remove o ouvinte de todos os contratos (silencioso se ausente)."""
        with self._lock:
            if observer in self._status_observers:
                self._status_observers.remove(observer)
            if observer in self._event_observers:
                self._event_observers.remove(observer)

    def get_status_observers(self) -> list[StatusObserver]:
        with self._lock:
            return list(self._status_observers)

    def get_event_observers(self) -> list[AppointmentEventObserver]:
        with self._lock:
            return list(self._event_observers)

    # -------------------------------------------------------------------------
    # Fan-out
    # -------------------------------------------------------------------------

    def notify_status_changed(self, transition: StatusTransition) -> int:
        """
        Notifica todos os StatusObserver sobre a transição.

        Returns:
            Quantidade de ouvintes que executaram sem erro
        """
        delivered = 0
        for observer in self.get_status_observers():
            try:
                observer.on_status_changed(transition)
                delivered += 1
            except Exception:
                logger.exception(
                    f"Erro ao notificar observer {type(observer).__name__} "
                    f"sobre mudança de status do agendamento {transition.appointment_id}"
                )
        return delivered

    def notify_event(self, event: AppointmentEvent) -> int:
        """
        Notifica todos os AppointmentEventObserver sobre um evento detalhado.

        Returns:
            Quantidade de ouvintes que executaram sem erro

        Raises:
            TypeError: Se o evento não é de um tipo conhecido
        """
        method_name = EVENT_METHODS.get(type(event))
        if method_name is None:
            raise TypeError(f"Unknown appointment event: {type(event)}")

        delivered = 0
        for observer in self.get_event_observers():
            try:
                getattr(observer, method_name)(event)
                delivered += 1
            except Exception:
                logger.exception(
                    f"Erro ao notificar observer {type(observer).__name__} "
                    f"({event.kind}) - Agendamento: {event.appointment_id}"
                )
        return delivered

    def publish_status_change(
        self,
        transition: StatusTransition,
        event: AppointmentEvent | None = None,
    ) -> None:
        """
        Publica uma mudança de status: primeiro o contrato simples,
        depois o evento detalhado (se houver).

        Mesmo status dos dois lados não gera notificação.
        """
        if transition.previous_status == transition.new_status:
            logger.debug(f"Agendamento {transition.appointment_id}: status inalterado, nada a notificar")
            return

        self.notify_status_changed(transition)
        if event is not None:
            self.notify_event(event)

    # -------------------------------------------------------------------------
    # Utility
    # -------------------------------------------------------------------------

    def clear(self) -> None:
        """Limpa todos os registros. Útil para testes."""
        with self._lock:
            self._status_observers.clear()
            self._event_observers.clear()


# Instância global do registry
_registry = _Registry()

register_observer = _registry.register_observer
unregister_observer = _registry.unregister_observer
get_status_observers = _registry.get_status_observers
get_event_observers = _registry.get_event_observers
notify_status_changed = _registry.notify_status_changed
notify_event = _registry.notify_event
publish_status_change = _registry.publish_status_change
clear = _registry.clear
