"""
Django Barbearia — Núcleo de notificações e validação de documentos.

Uso básico:
    from barbearia.documents import validate_cpf, validate_cnpj
    from barbearia import observers
    from barbearia.notifications import get_gateway

Para notificar o cliente sobre um agendamento:
    observers.notify_event(AppointmentConfirmed(...))
"""

__title__ = "Django Barbearia"
__version__ = "0.1.0a1"
__author__ = "Sua Barbearia Team"
