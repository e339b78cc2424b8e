"""
Barbearia Exceptions — Exceções específicas do núcleo da barbearia.

Todas as exceções seguem o padrão:
- code: Código máquina do erro (ex.: "delivery_failed", "invalid_transition")
- message: Mensagem legível para humanos
- context: Dados adicionais sobre o erro
"""

from __future__ import annotations


class BarbeariaError(Exception):
    """
    Classe base para todas as exceções da Barbearia.

    Attributes:
        code: Código máquina do erro
        message: Mensagem legível para humanos
        context: Dados adicionais sobre o erro
    """

    def __init__(self, code: str = "error", message: str = "", context: dict | None = None):
        self.code = code
        self.message = message
        self.context = context or {}
        super().__init__(message)


class NotificationError(BarbeariaError):
    """
    Falha definitiva no envio de uma notificação.

    Codes: "delivery_failed", "interrupted"
    """


class GatewayNotFound(BarbeariaError):
    """
    Gateway de mensagens não registrado.

    Codes: "gateway_not_found"
    """


class InvalidTransition(BarbeariaError):
    """
    Erro de transição de status inválida.

    Raised quando tenta confirmar um agendamento cancelado ou cancelar
    um agendamento já concluído.

    Codes: "invalid_transition"
    """
