"""Sessão de autenticação do cliente da loja."""

from app.sessions.auth_session import AuthSession

__all__ = [
    "AuthSession",
]
