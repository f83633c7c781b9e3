#!/usr/bin/env python3
"""Cria produtos de autopeças aleatórios para testes.

Garante as categorias padrão, insere N produtos com SKUs sequenciais
(SKU000001, SKU000002, ...) a partir da contagem atual e mostra a
distribuição por categoria. Falhas individuais são logadas e puladas.

Uso:
    python scripts/seed_test_products.py --count 200
"""

from __future__ import annotations

import argparse
import json
import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from maintenance import EXIT_FAILURE, EXIT_OK, add_common_arguments, open_connection, start_run
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger("scripts.seed_test_products")

DEFAULT_COUNT = 200
DEFAULT_CATEGORY_IMAGE = "/images/categories/default.jpg"
DEFAULT_PRODUCT_IMAGE = "/images/products/default-product.jpg"

CATEGORIES = (
    "Peças de Motor",
    "Sistema de Freios",
    "Suspensão",
    "Transmissão",
    "Sistema Elétrico",
    "Carroceria",
    "Pneus e Rodas",
    "Filtros",
    "Óleos e Fluidos",
    "Acessórios",
)
BRANDS = (
    "Bosch", "Continental", "Delphi", "Valeo", "Mahle",
    "NGK", "Denso", "Sachs", "Monroe", "Brembo",
    "TRW", "Febi", "Lemförder", "SKF", "Gates",
)
PART_NAMES = (
    "Filtro", "Vela", "Pastilha", "Disco", "Amortecedor",
    "Mola", "Correia", "Bomba", "Sensor", "Cabo",
    "Junta", "Retentor", "Rolamento", "Bucha", "Terminal",
    "Braço", "Pivô", "Coifa", "Reparo", "Kit",
)
PART_QUALIFIERS = (
    "Dianteiro", "Traseiro", "Direito", "Esquerdo", "Superior",
    "Inferior", "Interno", "Externo", "Completo", "Original",
    "Reforçado", "Esportivo", "Premium", "Standard", "Heavy Duty",
)
VEHICLES = (
    "Gol", "Palio", "Corsa", "Civic", "Corolla",
    "Fiesta", "Focus", "Uno", "Celta", "Ka",
    "HB20", "Onix", "Prisma", "Sandero", "Logan",
    "C3", "Peugeot 206", "207", "208", "Clio",
)
SPECIFICATIONS = (
    "Material: Aço carbono de alta resistência",
    "Tratamento: Galvanizado anticorrosão",
    "Garantia: 12 meses contra defeitos de fabricação",
    "Certificação: ISO 9001",
    "Origem: Nacional/Importado",
)

INSERT_CATEGORY = text(
    "INSERT INTO categories (name, description, image_url) "
    "VALUES (:name, :description, :image_url) ON CONFLICT (name) DO NOTHING"
)
INSERT_PRODUCT = text(
    "INSERT INTO products (name, description, original_price, stock_quantity, category_id, "
    "image_url, specifications, brand, sku, active) "
    "VALUES (:name, :description, :original_price, :stock_quantity, :category_id, "
    ":image_url, :specifications, :brand, :sku, :active)"
)
CATEGORY_STATS = text(
    "SELECT c.name, COUNT(p.id) AS product_count FROM categories c "
    "LEFT JOIN products p ON c.id = p.category_id "
    "GROUP BY c.id, c.name ORDER BY product_count DESC, c.name"
)


@dataclass(frozen=True)
class SeedStats:
    created: int
    failed: int


def format_sku(sequence: int) -> str:
    return f"SKU{sequence:06d}"


def build_product(rng: random.Random, category_id: Any, sequence: int) -> dict[str, Any]:
    """Produto aleatório pronto para INSERT_PRODUCT."""
    name = f"{rng.choice(PART_NAMES)} {rng.choice(PART_QUALIFIERS)} {rng.choice(VEHICLES)}"
    specs = list(SPECIFICATIONS[: rng.randint(3, 5)])
    specs.append(f"Peso: {rng.uniform(0.1, 5.1):.2f}kg")
    return {
        "name": name,
        "description": (
            f"{name} da marca {rng.choice(BRANDS)}. Produto de alta qualidade, "
            "compatível com diversos modelos de veículos. "
            "Instalação recomendada por profissional qualificado."
        ),
        "original_price": round(rng.uniform(10, 510), 2),
        "stock_quantity": rng.randint(1, 100),
        "category_id": category_id,
        "image_url": DEFAULT_PRODUCT_IMAGE,
        "specifications": json.dumps({"details": "; ".join(specs)}, ensure_ascii=False),
        "brand": rng.choice(BRANDS),
        "sku": format_sku(sequence),
        "active": True,
    }


def ensure_categories(conn: Connection) -> list[Any]:
    """Ids das categorias; cria as padrão se a tabela estiver vazia."""
    ids = list(conn.execute(text("SELECT id FROM categories ORDER BY id")).scalars())
    if ids:
        return ids

    print("Nenhuma categoria encontrada, criando categorias padrão...")
    for name in CATEGORIES:
        conn.execute(
            INSERT_CATEGORY,
            {
                "name": name,
                "description": f"Categoria de {name}",
                "image_url": DEFAULT_CATEGORY_IMAGE,
            },
        )
    conn.commit()
    return list(conn.execute(text("SELECT id FROM categories ORDER BY id")).scalars())


def seed_products(conn: Connection, count: int, rng: random.Random) -> SeedStats:
    category_ids = ensure_categories(conn)
    existing = conn.execute(text("SELECT COUNT(*) FROM products")).scalar_one()
    print(f"{len(category_ids)} categorias, {existing} produtos existentes")

    created = failed = 0
    for offset in range(1, count + 1):
        product = build_product(rng, rng.choice(category_ids), existing + offset)
        try:
            conn.execute(INSERT_PRODUCT, product)
            conn.commit()
        except SQLAlchemyError as exc:
            conn.rollback()
            failed += 1
            logger.warning(
                "seed_product_failed",
                extra={"sku": product["sku"], "error_message": str(exc)},
            )
            continue
        created += 1
        if created % 20 == 0:
            print(f"Criados {created}/{count} produtos...")
    return SeedStats(created=created, failed=failed)


def category_stats(conn: Connection) -> list[tuple[str, int]]:
    return [(row.name, row.product_count) for row in conn.execute(CATEGORY_STATS)]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COUNT,
        help="Quantidade de produtos a criar (padrão: %(default)s).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Semente do gerador aleatório (execuções reprodutíveis).",
    )
    add_common_arguments(parser)
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count deve ser >= 1")
    return args


def main(argv: list[str] | None = None, engine: Engine | None = None) -> int:
    args = parse_args(argv)
    start_run(verbose=args.verbose)
    rng = random.Random(args.seed)

    try:
        with open_connection(engine) as conn:
            stats = seed_products(conn, args.count, rng)
            print(f"Concluído: {stats.created} produtos criados, {stats.failed} falhas.")
            print("\nProdutos por categoria:")
            for name, total in category_stats(conn):
                print(f"  {name}: {total} produtos")
    except (SQLAlchemyError, ValueError) as exc:
        logger.error("seed_failed", extra={"error_message": str(exc)})
        print(f"Erro geral: {exc}")
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
