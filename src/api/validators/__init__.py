"""Validators — regras client-side antes de chamar o backend.

- documents: CPF/CNPJ por dígito verificador
- payments: payloads de pagamento (cartão/PIX)
"""

from api.validators.documents import (
    only_digits,
    validate_cnpj,
    validate_cpf,
    validate_document,
)
from api.validators.payments import validate_payment_data

__all__ = [
    "only_digits",
    "validate_cnpj",
    "validate_cpf",
    "validate_document",
    "validate_payment_data",
]
