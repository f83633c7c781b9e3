#!/usr/bin/env python3
"""Atualiza as imagens das categorias principais.

Padrão: ícones SVG de /images/categories. Com --restore volta às
imagens originais enviadas (apenas categorias ativas).

Uso:
    python scripts/update_category_images.py
    python scripts/update_category_images.py --restore
"""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from maintenance import EXIT_FAILURE, EXIT_OK, add_common_arguments, open_connection, start_run
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger("scripts.update_category_images")

SVG_IMAGES = {
    "Motor": "/images/categories/motor.svg",
    "Freios": "/images/categories/freios.svg",
    "Suspensão": "/images/categories/suspensao.svg",
    "Transmissão": "/images/categories/transmissao.svg",
    "Elétrica": "/images/categories/eletrica.svg",
    "Carroceria": "/images/categories/carroceria.svg",
}

UPLOADED_IMAGES = {
    "Motor": "/lovable-uploads/948624a5-574b-4a8f-9a66-483ca0ad0609.png",
    "Freios": "/lovable-uploads/223cae08-5df5-4280-b6a4-5fcb31ccedcc.png",
    "Suspensão": "/lovable-uploads/68231c1e-52fd-4069-bea9-a9ea852ee7e0.png",
    "Transmissão": "/lovable-uploads/25989ba3-557d-41ff-b96c-fb1b7a826c19.png",
    "Elétrica": "/lovable-uploads/f857c4a9-64a8-42bd-a633-5002d3e485ce.png",
    "Carroceria": "/lovable-uploads/de1a3a69-7f40-4318-b1fa-b8fe9ba24421.png",
}


def update_images(
    conn: Connection,
    mapping: dict[str, str],
    *,
    active_only: bool,
) -> list[str]:
    """Aplica o mapeamento nome -> URL.

    Returns:
        Categorias do mapeamento não encontradas no banco.
    """
    sql = "UPDATE categories SET image_url = :url WHERE name = :name"
    if active_only:
        sql += " AND active = true"

    missing: list[str] = []
    for name, url in mapping.items():
        result = conn.execute(text(sql), {"url": url, "name": name})
        if result.rowcount:
            print(f"   {name}: {url}")
        else:
            missing.append(name)
            print(f"   {name}: categoria não encontrada")
    conn.commit()
    return missing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--restore",
        action="store_true",
        help="Restaura as imagens originais enviadas (categorias ativas).",
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, engine: Engine | None = None) -> int:
    args = parse_args(argv)
    start_run(verbose=args.verbose)
    mapping = UPLOADED_IMAGES if args.restore else SVG_IMAGES

    try:
        with open_connection(engine) as conn:
            missing = update_images(conn, mapping, active_only=args.restore)
    except (SQLAlchemyError, ValueError) as exc:
        logger.error("category_images_failed", extra={"error_message": str(exc)})
        print(f"Erro ao atualizar imagens: {exc}")
        return EXIT_FAILURE

    updated = len(mapping) - len(missing)
    logger.info(
        "category_images_updated",
        extra={"updated": updated, "missing": missing, "restore": args.restore},
    )
    print(f"{updated}/{len(mapping)} categorias atualizadas.")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
