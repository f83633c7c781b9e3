"""Testes de run_migrations.py, setup_database.py e run_migration.py."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

import run_migration
import run_migrations
import setup_database

USERS_SQL = (
    "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, email TEXT UNIQUE, "
    "role TEXT, status TEXT);"
)
CATEGORIES_SQL = "CREATE TABLE categories (id INTEGER PRIMARY KEY, name TEXT UNIQUE);"
ADMIN_SQL = (
    "INSERT OR IGNORE INTO users (name, email, role, status) "
    "VALUES ('Administrador', 'admin@skinaecopecas.com.br', 'admin', 'active');"
)


@pytest.fixture
def migrations(migrations_dir: Path) -> Path:
    (migrations_dir / "001_create_users.sql").write_text(USERS_SQL, encoding="utf-8")
    (migrations_dir / "002_create_categories.sql").write_text(CATEGORIES_SQL, encoding="utf-8")
    (migrations_dir / "003_admin_user.sql").write_text(ADMIN_SQL, encoding="utf-8")
    (migrations_dir / "README.md").write_text("docs", encoding="utf-8")
    return migrations_dir


class TestRunMigrations:
    """Execução tolerante a objetos existentes."""

    def test_runs_all_and_reports(self, engine, db, migrations, capsys) -> None:
        code = run_migrations.main(["--migrations-dir", str(migrations)], engine=engine)
        out = capsys.readouterr().out
        assert code == run_migrations.EXIT_OK
        assert "Encontradas 3 migrações" in out
        assert "Banco de dados vazio" in out
        assert "Usuários: 1" in out
        assert "Produtos: tabela ausente" in out
        assert "admin@skinaecopecas.com.br" in out
        assert db.rows("SELECT role FROM users") == [("admin",)]

    def test_rerun_skips_existing_objects(self, engine, migrations, capsys) -> None:
        run_migrations.main(["--migrations-dir", str(migrations)], engine=engine)
        capsys.readouterr()
        code = run_migrations.main(["--migrations-dir", str(migrations)], engine=engine)
        out = capsys.readouterr().out
        assert code == run_migrations.EXIT_OK
        assert "Tabelas já existem" in out
        assert "001_create_users.sql: objetos já existem, pulando" in out

    def test_broken_migration_fails(self, engine, migrations, capsys) -> None:
        (migrations / "004_broken.sql").write_text("CREAT TABLE x (id INT);", encoding="utf-8")
        code = run_migrations.main(["--migrations-dir", str(migrations)], engine=engine)
        assert code == run_migrations.EXIT_FAILURE
        assert "Erro ao executar migrações" in capsys.readouterr().out

    def test_missing_directory(self, engine, tmp_path, capsys) -> None:
        code = run_migrations.main(["--migrations-dir", str(tmp_path / "nada")], engine=engine)
        assert code == run_migrations.EXIT_FAILURE
        assert "não encontrado" in capsys.readouterr().out


class TestSetupDatabase:
    """Modo estrito e reset."""

    def test_strict_setup(self, engine, db, migrations, capsys) -> None:
        code = setup_database.main(["--migrations-dir", str(migrations)], engine=engine)
        assert code == setup_database.EXIT_OK
        assert "3 migrações executadas" in capsys.readouterr().out

    def test_strict_setup_fails_on_existing_objects(self, engine, migrations, capsys) -> None:
        setup_database.main(["--migrations-dir", str(migrations)], engine=engine)
        code = setup_database.main(["--migrations-dir", str(migrations)], engine=engine)
        assert code == setup_database.EXIT_FAILURE
        assert "Erro durante a configuração" in capsys.readouterr().out

    def test_reset_requires_confirmation(self, engine, migrations, monkeypatch, capsys) -> None:
        monkeypatch.setattr("builtins.input", lambda prompt: "não")
        code = setup_database.main(
            ["--reset", "--migrations-dir", str(migrations)], engine=engine
        )
        assert code == setup_database.EXIT_FAILURE
        assert "Reset cancelado" in capsys.readouterr().out

    def test_reset_database_drops_known_objects(self) -> None:
        conn = MagicMock()
        setup_database.reset_database(conn)
        executed = [call.args[0] for call in conn.exec_driver_sql.call_args_list]
        assert executed[0] == "DROP TABLE IF EXISTS stock_history CASCADE"
        assert "DROP TABLE IF EXISTS users CASCADE" in executed
        assert executed[-1] == "DROP FUNCTION IF EXISTS update_product_stock() CASCADE"
        conn.commit.assert_called_once()

    def test_reset_statements_order(self) -> None:
        statements = setup_database.reset_statements()
        # tabelas filhas antes das tabelas referenciadas
        assert statements.index("DROP TABLE IF EXISTS order_items CASCADE") < statements.index(
            "DROP TABLE IF EXISTS orders CASCADE"
        )


class TestRunMigration:
    """Arquivo único, opcionalmente comando a comando."""

    def test_split_with_expected_tables(self, engine, db, tmp_path, capsys) -> None:
        path = tmp_path / "015_mercado_livre.sql"
        path.write_text(
            "CREATE TABLE mercado_livre_accounts (id INTEGER PRIMARY KEY);\n"
            "CREATE TABLE product_images_ml (ml_id TEXT, image_url TEXT, position INTEGER);\n",
            encoding="utf-8",
        )
        db.run("CREATE TABLE mercado_livre_accounts (id INTEGER PRIMARY KEY)")
        code = run_migration.main(
            [
                str(path),
                "--split",
                "--expect-table",
                "mercado_livre_accounts",
                "--expect-table",
                "product_images_ml",
            ],
            engine=engine,
        )
        out = capsys.readouterr().out
        assert code == run_migration.EXIT_OK
        assert "1 comandos executados, 1 já existentes" in out
        assert "ok: product_images_ml" in out

    def test_missing_expected_table_fails(self, engine, tmp_path, capsys) -> None:
        path = tmp_path / "016.sql"
        path.write_text("CREATE TABLE a (id INTEGER);", encoding="utf-8")
        code = run_migration.main([str(path), "--expect-table", "b"], engine=engine)
        out = capsys.readouterr().out
        assert code == run_migration.EXIT_FAILURE
        assert "AUSENTE: b" in out
        assert "Apenas 0/1 tabelas criadas" in out

    def test_whole_file_already_applied(self, engine, db, tmp_path, capsys) -> None:
        path = tmp_path / "017.sql"
        path.write_text("CREATE TABLE a (id INTEGER);", encoding="utf-8")
        db.run("CREATE TABLE a (id INTEGER)")
        assert run_migration.main([str(path)], engine=engine) == run_migration.EXIT_OK
        assert "017.sql: já aplicado" in capsys.readouterr().out

    def test_missing_file(self, engine, tmp_path) -> None:
        assert run_migration.main([str(tmp_path / "x.sql")], engine=engine) == 1
