"""Conteúdo do catálogo: categorias, slides e cupons."""

from __future__ import annotations

from pydantic import Field

from app.domain.base import StorefrontModel


class Category(StorefrontModel):
    id: str
    name: str
    slug: str | None = None
    description: str | None = None
    image_url: str | None = None
    is_active: bool = True
    product_count: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    width_cm: float | None = None
    height_cm: float | None = None
    length_cm: float | None = None
    weight_kg: float | None = None


class CategoryList(StorefrontModel):
    categories: list[Category] = Field(default_factory=list)
    total: int = 0


class Slide(StorefrontModel):
    id: str
    title: str
    subtitle: str | None = None
    cta_text: str | None = None
    cta_link: str | None = None
    background_image: str | None = None
    order: int = 0
    is_active: bool = True
    created_at: str | None = None
    updated_at: str | None = None


class SlideList(StorefrontModel):
    slides: list[Slide] = Field(default_factory=list)
    total: int = 0


class SlideInput(StorefrontModel):
    """Campos de texto do formulário multipart de slides."""

    title: str | None = None
    subtitle: str | None = None
    cta_text: str | None = None
    cta_link: str | None = None
    is_active: bool | None = None


class CouponInput(StorefrontModel):
    user_id: str
    discount_percentage: float
    expires_at: str | None = None
