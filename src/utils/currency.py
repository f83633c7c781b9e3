"""Formatação de valores em reais (pt-BR)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "R$"


def format_currency(value: float | int | Decimal) -> str:
    """Formata valor como BRL: separador de milhar "." e decimal ",".

    Examples:
        >>> format_currency(1234.56)
        'R$ 1.234,56'
        >>> format_currency(-1)
        '-R$ 1,00'
    """
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sign}{CURRENCY_SYMBOL} {text}"
