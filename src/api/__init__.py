"""API — camada de borda com o backend da loja.

Responsabilidades:
- Falar HTTP com o backend (produtos, carrinho, pedidos, admin)
- Falar com as rotas de pagamento (cartão e PIX)
- Validar payloads no cliente antes do envio

Subpastas:
- connectors/: adapters HTTP (storefront, payments)
- validators/: CPF/CNPJ e payloads de pagamento

NÃO PODE conter: persistência do token, acesso direto ao banco.
"""
