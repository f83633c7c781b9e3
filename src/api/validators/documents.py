"""Validação de documentos brasileiros (CPF e CNPJ) por dígito verificador.

Aceitam texto formatado ("529.982.247-25", "11.222.333/0001-81"):
tudo que não é dígito é descartado antes da conta.
"""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"\D")

CPF_LENGTH = 11
CNPJ_LENGTH = 14
CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def only_digits(value: str | None) -> str:
    return _NON_DIGITS.sub("", value or "")


def _cpf_digit(digits: str, first_weight: int) -> int:
    total = sum(int(d) * w for d, w in zip(digits, range(first_weight, 1, -1)))
    remainder = total * 10 % 11
    return 0 if remainder == 10 else remainder


def _cnpj_digit(digits: str, weights: tuple[int, ...]) -> int:
    remainder = sum(int(d) * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def validate_cpf(value: str | None) -> bool:
    """Valida CPF.

    Rejeita tamanho diferente de 11 e sequências repetidas
    ("111.111.111-11" passa na conta, mas não é CPF válido).

    Examples:
        >>> validate_cpf("529.982.247-25")
        True
        >>> validate_cpf("11111111111")
        False
    """
    cpf = only_digits(value)
    if len(cpf) != CPF_LENGTH or len(set(cpf)) == 1:
        return False
    first = _cpf_digit(cpf[:9], 10)
    second = _cpf_digit(cpf[:10], 11)
    return cpf[9:] == f"{first}{second}"


def validate_cnpj(value: str | None) -> bool:
    """Valida CNPJ.

    Examples:
        >>> validate_cnpj("11.222.333/0001-81")
        True
        >>> validate_cnpj("11111111111111")
        False
    """
    cnpj = only_digits(value)
    if len(cnpj) != CNPJ_LENGTH or len(set(cnpj)) == 1:
        return False
    first = _cnpj_digit(cnpj[:12], CNPJ_FIRST_WEIGHTS)
    second = _cnpj_digit(cnpj[:13], CNPJ_SECOND_WEIGHTS)
    return cnpj[12:] == f"{first}{second}"


def validate_document(value: str | None) -> bool:
    """CPF ou CNPJ, escolhido pela quantidade de dígitos."""
    digits = only_digits(value)
    if len(digits) == CPF_LENGTH:
        return validate_cpf(digits)
    if len(digits) == CNPJ_LENGTH:
        return validate_cnpj(digits)
    return False
