"""Connectors — adapters HTTP para o backend da loja.

Estrutura:
- storefront/: ApiService (catálogo, carrinho, auth, pedidos, admin)
- payments/: PaymentService (Mercado Pago via backend)
"""

__all__: list[str] = []
