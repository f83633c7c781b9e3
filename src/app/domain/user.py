"""Usuários, autenticação e endereços de entrega."""

from __future__ import annotations

from pydantic import Field

from app.domain.base import Pagination, StorefrontModel


class User(StorefrontModel):
    id: str
    name: str
    last_name: str | None = None
    email: str
    phone: str | None = None
    cpf: str | None = None
    role: str = "customer"
    is_active: bool = True
    created_at: str | None = None
    updated_at: str | None = None


class AuthResult(StorefrontModel):
    """Resposta de login/registro: usuário + bearer token."""

    user: User
    token: str
    expires_in: str | None = None


class ProfileResponse(StorefrontModel):
    user: User


class AdminUserList(StorefrontModel):
    users: list[User] = Field(default_factory=list)
    pagination: Pagination | None = None


class RegisterInput(StorefrontModel):
    name: str
    email: str
    password: str
    phone: str | None = None
    cpf: str | None = None


class ProfileUpdate(StorefrontModel):
    name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    cpf: str | None = None


class AddressInput(StorefrontModel):
    """Dados para criar/atualizar endereço."""

    title: str
    recipient_name: str
    street: str
    number: str
    complement: str | None = None
    neighborhood: str
    city: str
    state: str
    zip_code: str
    country: str | None = None
    is_default: bool | None = None


class UserAddress(StorefrontModel):
    """Endereço salvo. No máximo um `is_default` por usuário (backend)."""

    id: str
    user_id: str
    title: str
    recipient_name: str
    street: str
    number: str
    complement: str | None = None
    neighborhood: str
    city: str
    state: str
    zip_code: str
    country: str = "Brasil"
    is_default: bool = False
    created_at: str | None = None
    updated_at: str | None = None
