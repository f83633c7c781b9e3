"""Cálculo de frete.

O serviço de frete usa snake_case no payload, então estes modelos
não usam aliases camelCase nos campos do transportador.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ShippingProduct(BaseModel):
    """Pacote enviado para cotação (medidas em cm/kg)."""

    model_config = ConfigDict(extra="allow")

    id: str
    width: float
    height: float
    length: float
    weight: float
    insurance_value: float
    quantity: int = 1


class DeliveryRange(BaseModel):
    model_config = ConfigDict(extra="allow")

    min: int | None = None
    max: int | None = None


class ShippingOption(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    company: str = ""
    price: float = 0.0
    discount: float = 0.0
    currency: str = "R$"
    delivery_time: int | None = None
    delivery_range: DeliveryRange = Field(default_factory=DeliveryRange)
    packages: list[Any] = Field(default_factory=list)
    additional_services: dict[str, Any] = Field(default_factory=dict)
    company_id: str | None = None
    error: str | None = None

    @property
    def is_available(self) -> bool:
        return not self.error
