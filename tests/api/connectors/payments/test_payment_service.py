"""Testes do PaymentService (rotas de pagamento via httpx.MockTransport)."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from api.connectors.payments import PaymentClientConfig, PaymentService, create_payment_service
from config.settings import PaymentSettings
from utils.errors import PaymentServiceError

Handler = Callable[[httpx.Request], httpx.Response]


def _service(handler: Handler) -> PaymentService:
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://testserver"
    )
    return PaymentService(client=client)


class TestPaymentRequests:
    """Cartão, PIX e status repassam o JSON do backend."""

    @pytest.mark.asyncio
    async def test_card_payment_posts_to_process_payment(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"success": True, "payment": {"id": 123, "status": "approved"}}
            )

        service = _service(handler)
        result = await service.create_card_payment(
            {"transaction_amount": 100.0, "token": "tok", "installments": 1}
        )
        assert result["payment"]["status"] == "approved"
        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/payments/process_payment"
        assert json.loads(seen[0].content)["token"] == "tok"

    @pytest.mark.asyncio
    async def test_pix_payment(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/payments/process_pix"
            return httpx.Response(
                201,
                json={"success": True, "qr_code": "000201...", "ticket_url": "https://mp/t"},
            )

        result = await _service(handler).create_pix_payment({"transaction_amount": 10})
        assert result["qr_code"] == "000201..."

    @pytest.mark.asyncio
    async def test_error_status_is_not_raised(self) -> None:
        """Status não-2xx é devolvido como corpo; quem chama lê success/error."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"success": False, "error": "Cartão recusado"})

        result = await _service(handler).create_card_payment({})
        assert result == {"success": False, "error": "Cartão recusado"}

    @pytest.mark.asyncio
    async def test_get_payment_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/api/payments/987"
            return httpx.Response(200, json={"success": True, "payment": {"status": "pending"}})

        result = await _service(handler).get_payment_status("987")
        assert result["payment"]["status"] == "pending"

    @pytest.mark.asyncio
    async def test_network_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused")

        with pytest.raises(PaymentServiceError, match="Erro de rede: ConnectError"):
            await _service(handler).create_pix_payment({})

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(PaymentServiceError) as exc_info:
            await _service(handler).get_payment_status("1")
        assert exc_info.value.status_code == 502


class TestPaymentMethods:
    @pytest.mark.asyncio
    async def test_returns_data(self) -> None:
        methods = [{"id": "visa"}, {"id": "pix"}]

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/payments/methods"
            return httpx.Response(200, json={"success": True, "data": methods})

        assert await _service(handler).get_payment_methods() == methods

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, json={"error": "indisponível"})

        with pytest.raises(PaymentServiceError, match="HTTP error! status: 503"):
            await _service(handler).get_payment_methods()

    @pytest.mark.asyncio
    async def test_unsuccessful_body_uses_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": False, "error": "Sem credenciais"})

        with pytest.raises(PaymentServiceError, match="Sem credenciais"):
            await _service(handler).get_payment_methods()

    @pytest.mark.asyncio
    async def test_unsuccessful_body_without_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": False})

        with pytest.raises(PaymentServiceError, match="Erro ao buscar métodos de pagamento"):
            await _service(handler).get_payment_methods()


class TestPureHelpers:
    """Helpers expostos pelo adaptador."""

    def test_validate_cpf_and_cnpj(self) -> None:
        assert PaymentService.validate_cpf("529.982.247-25")
        assert not PaymentService.validate_cnpj("11.222.333/0001-80")

    def test_format_currency(self) -> None:
        assert PaymentService.format_currency(1234.56) == "R$ 1.234,56"

    def test_validate_payment_data(self) -> None:
        assert PaymentService.validate_payment_data({}, "pix")


class TestFactory:
    @pytest.mark.asyncio
    async def test_create_payment_service_uses_settings(self) -> None:
        service = create_payment_service(
            PaymentSettings(base_url="/v2/payments", origin="http://pagamentos.local")
        )
        assert service._config == PaymentClientConfig(
            base_url="/v2/payments", origin="http://pagamentos.local"
        )
        await service.aclose()
        assert service._client.is_closed
