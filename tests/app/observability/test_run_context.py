"""Testes do run_id da execução."""

from __future__ import annotations

from app.observability import generate_run_id, get_run_id, reset_run_id, set_run_id


class TestRunContext:
    def test_set_and_reset(self) -> None:
        before = get_run_id()
        token = set_run_id("migracao-001")
        assert get_run_id() == "migracao-001"
        reset_run_id(token)
        assert get_run_id() == before

    def test_generates_when_empty(self) -> None:
        token = set_run_id()
        try:
            assert len(get_run_id()) == 12
        finally:
            reset_run_id(token)

    def test_generate_run_id_is_unique(self) -> None:
        assert generate_run_id() != generate_run_id()
