"""Operações de autenticação e perfil.

Login e registro só devolvem o token: gravar na sessão
(`ApiService.set_token`) é decisão de quem chama.
"""

from __future__ import annotations

from typing import Any

from api.connectors.storefront.errors import PHONE_FORMAT_MESSAGE, is_phone_format_error
from api.connectors.storefront.resource import StorefrontResource, to_payload
from app.domain.user import AuthResult, ProfileResponse, ProfileUpdate, RegisterInput
from utils.errors import StorefrontApiError


def _auth_result(body: Any) -> AuthResult:
    # registro responde {message, data: {user, token}} sem flag success
    if isinstance(body, dict) and "token" not in body and isinstance(body.get("data"), dict):
        body = body["data"]
    return AuthResult.model_validate(body)


class AuthOperations(StorefrontResource):
    async def register(self, data: RegisterInput | dict[str, Any]) -> AuthResult:
        """Cria conta.

        Raises:
            StorefrontApiError: Telefone recusado vira mensagem com o
                formato esperado; demais erros propagam como vieram.
        """
        try:
            body = await self._http.request("/auth/register", "POST", json=to_payload(data))
        except StorefrontApiError as exc:
            if is_phone_format_error(exc.message):
                raise StorefrontApiError(
                    PHONE_FORMAT_MESSAGE,
                    status_code=exc.status_code,
                    payload=exc.payload,
                ) from exc
            raise
        return _auth_result(body)

    async def login(self, email: str, password: str) -> AuthResult:
        body = await self._http.request(
            "/auth/login", "POST", json={"email": email, "password": password}
        )
        return _auth_result(body)

    async def get_profile(self) -> ProfileResponse:
        body = await self._http.request("/auth/profile")
        return ProfileResponse.model_validate(body)

    async def update_profile(self, data: ProfileUpdate | dict[str, Any]) -> Any:
        return await self._http.request("/auth/profile", "PUT", json=to_payload(data))

    async def change_password(self, current_password: str, new_password: str) -> Any:
        return await self._http.request(
            "/auth/change-password",
            "POST",
            json={"currentPassword": current_password, "newPassword": new_password},
        )

    async def logout(self) -> Any:
        return await self._http.request("/auth/logout", "POST")

    async def forgot_password(self, email: str) -> Any:
        return await self._http.request("/auth/forgot-password", "POST", json={"email": email})

    async def reset_password(self, token: str, new_password: str) -> Any:
        return await self._http.request(
            "/auth/reset-password",
            "POST",
            json={"token": token, "newPassword": new_password},
        )
