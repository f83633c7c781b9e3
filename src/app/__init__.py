"""App — composição, sessão de autenticação e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: DTOs trocados com o backend
- infra/: implementações concretas de IO (token stores, banco)
- protocols/: contratos/interfaces
- sessions/: sessão de autenticação do cliente
- observability/: run_id injetado nos logs

Padrão: app compõe; api adapta; utils apoia.
"""
