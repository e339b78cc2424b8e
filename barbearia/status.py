"""
Barbearia Status — Status de agendamento e regras de transição.
"""

from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _

from barbearia.exceptions import InvalidTransition


class AppointmentStatus(models.TextChoices):
    """Status canônicos do agendamento."""

    PENDING = "pending", _("pendente")
    CONFIRMED = "confirmed", _("confirmado")
    COMPLETED = "completed", _("concluído")
    CANCELED = "canceled", _("cancelado")
    NO_SHOW = "no_show", _("faltou")


# (atual, novo) que nunca são permitidos
FORBIDDEN_TRANSITIONS = {
    (AppointmentStatus.CANCELED, AppointmentStatus.CONFIRMED):
        "Não é possível confirmar um agendamento cancelado",
    (AppointmentStatus.COMPLETED, AppointmentStatus.CANCELED):
        "Não é possível cancelar um agendamento já concluído",
}


def is_noop_transition(current: str, new: str) -> bool:
    """Mesmo status dos dois lados: operação idempotente, nada a notificar."""
    return current == new


def validate_transition(current: str, new: str) -> None:
    """
    Valida a transição de status.

    Qualquer transição é permitida, exceto confirmar um agendamento
    cancelado e cancelar um agendamento concluído.

    Raises:
        InvalidTransition: Se a transição não for permitida
    """
    message = FORBIDDEN_TRANSITIONS.get((current, new))
    if message:
        raise InvalidTransition(
            code="invalid_transition",
            message=message,
            context={"current_status": str(current), "requested_status": str(new)},
        )
