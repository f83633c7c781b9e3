#!/usr/bin/env python3
"""Corrige URLs http:// das imagens importadas do Mercado Livre para https://.

Afeta product_images_ml (chave ml_id + position) e products (id).

Uso:
    python scripts/fix_ml_image_urls.py
    python scripts/fix_ml_image_urls.py --dry-run
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from maintenance import EXIT_FAILURE, EXIT_OK, add_common_arguments, open_connection, start_run
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger("scripts.fix_ml_image_urls")

INSECURE_PREFIX = "http://http2.mlstatic.com"
SECURE_PREFIX = "https://http2.mlstatic.com"


@dataclass(frozen=True)
class FixStats:
    images: int = 0
    products: int = 0

    @property
    def total(self) -> int:
        return self.images + self.products


def secure_url(url: str) -> str:
    return url.replace(INSECURE_PREFIX, SECURE_PREFIX, 1)


def fix_image_table(conn: Connection, *, apply: bool) -> int:
    rows = conn.execute(
        text(
            "SELECT ml_id, image_url, position FROM product_images_ml "
            "WHERE image_url LIKE :pattern"
        ),
        {"pattern": f"{INSECURE_PREFIX}%"},
    ).all()
    print(f"product_images_ml: {len(rows)} URLs com problema")
    if apply:
        for row in rows:
            conn.execute(
                text(
                    "UPDATE product_images_ml SET image_url = :url "
                    "WHERE ml_id = :ml_id AND position = :position"
                ),
                {"url": secure_url(row.image_url), "ml_id": row.ml_id, "position": row.position},
            )
    return len(rows)


def fix_product_table(conn: Connection, *, apply: bool) -> int:
    rows = conn.execute(
        text("SELECT id, image_url FROM products WHERE image_url LIKE :pattern"),
        {"pattern": f"{INSECURE_PREFIX}%"},
    ).all()
    print(f"products: {len(rows)} URLs com problema")
    if apply:
        for row in rows:
            conn.execute(
                text("UPDATE products SET image_url = :url WHERE id = :id"),
                {"url": secure_url(row.image_url), "id": row.id},
            )
    return len(rows)


def fix_urls(conn: Connection, *, apply: bool = True) -> FixStats:
    """Corrige as duas tabelas numa única transação."""
    stats = FixStats(
        images=fix_image_table(conn, apply=apply),
        products=fix_product_table(conn, apply=apply),
    )
    if apply:
        conn.commit()
    return stats


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Só conta as URLs afetadas, sem alterar o banco.",
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, engine: Engine | None = None) -> int:
    args = parse_args(argv)
    start_run(verbose=args.verbose)

    try:
        with open_connection(engine) as conn:
            stats = fix_urls(conn, apply=not args.dry_run)
    except (SQLAlchemyError, ValueError) as exc:
        logger.error("fix_ml_image_urls_failed", extra={"error_message": str(exc)})
        print(f"Erro ao corrigir URLs: {exc}")
        return EXIT_FAILURE

    mode = "dry-run" if args.dry_run else "apply"
    logger.info("ml_image_urls_fixed", extra={"mode": mode, "total": stats.total})
    print(f"[{mode}] images={stats.images} products={stats.products} total={stats.total}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
