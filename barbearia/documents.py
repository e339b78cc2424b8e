"""
Barbearia Documents — Validação de CPF e CNPJ.

Implementa o algoritmo módulo 11 dos dígitos verificadores:
- CPF: Cadastro de Pessoas Físicas (11 dígitos)
- CNPJ: Cadastro Nacional da Pessoa Jurídica (14 dígitos)

As funções de validação nunca levantam exceção: qualquer entrada
malformada (None, vazia, com tamanho errado, sequência repetida)
resulta em False.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

_NON_DIGITS = re.compile(r"[^0-9]")

CPF_FIRST_WEIGHTS = tuple(range(10, 1, -1))
CPF_SECOND_WEIGHTS = tuple(range(11, 1, -1))
CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


class DocumentType(Enum):
    """Tipos de documento aceitos para cadastro de barbearias."""

    CPF = ("CPF", 11, "###.###.###-##")
    CNPJ = ("CNPJ", 14, "##.###.###/####-##")

    def __init__(self, label: str, length: int, mask: str):
        self.label = label
        self.length = length
        self.mask = mask

    def has_valid_length(self, value: str | None) -> bool:
        """Verifica se o documento tem a quantidade de dígitos deste tipo."""
        digits = clean_document(value)
        return digits is not None and len(digits) == self.length


def clean_document(value: Any) -> str | None:
    """Remove formatação (pontos, traços, barras), mantendo apenas dígitos."""
    if not isinstance(value, str):
        return None
    return _NON_DIGITS.sub("", value)


def _check_digit(digits: str, weights: tuple[int, ...]) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _validate(value: Any, length: int, first: tuple[int, ...], second: tuple[int, ...]) -> bool:
    digits = clean_document(value)
    if not digits or len(digits) != length:
        return False

    # Sequências repetidas (000..., 111...) são rejeitadas mesmo quando
    # passam no cálculo
    if len(set(digits)) == 1:
        return False

    base = length - 2
    if _check_digit(digits[:base], first) != int(digits[base]):
        return False
    return _check_digit(digits[: base + 1], second) == int(digits[base + 1])


def validate_cpf(value: Any) -> bool:
    """
    Valida um CPF (com ou sem formatação).

    Examples:
        >>> validate_cpf("191.000.000-00")
        True
        >>> validate_cpf("123.456.789-00")
        False
    """
    return _validate(value, DocumentType.CPF.length, CPF_FIRST_WEIGHTS, CPF_SECOND_WEIGHTS)


def validate_cnpj(value: Any) -> bool:
    """
    Valida um CNPJ (com ou sem formatação).

    Examples:
        >>> validate_cnpj("11.444.777/0001-61")
        True
    """
    return _validate(value, DocumentType.CNPJ.length, CNPJ_FIRST_WEIGHTS, CNPJ_SECOND_WEIGHTS)


def validate(value: Any, document_type: DocumentType | None) -> bool:
    """Valida um documento de acordo com o tipo informado."""
    if value is None or document_type is None:
        return False
    if document_type is DocumentType.CPF:
        return validate_cpf(value)
    return validate_cnpj(value)


def guess_document_type(value: Any) -> DocumentType | None:
    """Infere o tipo pelo número de dígitos (11 = CPF, 14 = CNPJ)."""
    for document_type in DocumentType:
        if document_type.has_valid_length(value):
            return document_type
    return None


def format_document(value: Any, document_type: DocumentType) -> str | None:
    """
    Aplica a máscara do tipo ao documento.

    Returns:
        Documento formatado ou None se a quantidade de dígitos não confere
    """
    digits = clean_document(value)
    if digits is None or len(digits) != document_type.length:
        return None

    chars = iter(digits)
    return "".join(next(chars) if c == "#" else c for c in document_type.mask)
