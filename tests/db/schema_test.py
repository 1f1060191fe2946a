"""Tests that the DuckDB layout matches the catalog declarations."""

from __future__ import annotations

import pytest

from hhreport.catalog.columns import Column, ColumnType
from hhreport.catalog.tables import TABLES


def _duckdb_type(col: Column) -> str:
    if col.type is ColumnType.TEXT:
        return "VARCHAR"
    if col.type in (ColumnType.INTEGER, ColumnType.SERIAL):
        return "INTEGER"
    if col.type is ColumnType.TIMESTAMP:
        return "TIMESTAMP"
    return f"DECIMAL({col.precision},{col.scale})"


def _table_info(db, table: str) -> dict[str, tuple]:
    """Map column name to (type, notnull, default, pk)."""
    rows = db.execute(f"PRAGMA table_info('{table}')").fetchall()
    return {row[1]: (row[2], row[3], row[4], row[5]) for row in rows}


class TestPersistedLayout:
    """Column names, types and nullability as declared."""

    @pytest.mark.parametrize("table", list(TABLES))
    def test_column_names_in_order(self, db, table):
        names = list(_table_info(db, table))
        assert names == [c.name for c in TABLES[table].columns]

    @pytest.mark.parametrize("table", list(TABLES))
    def test_column_types(self, db, table):
        info = _table_info(db, table)
        for col in TABLES[table].columns:
            assert info[col.name][0] == _duckdb_type(col), col.name

    @pytest.mark.parametrize("table", list(TABLES))
    def test_nullability(self, db, table):
        info = _table_info(db, table)
        for col in TABLES[table].columns:
            assert bool(info[col.name][1]) is not col.nullable, col.name

    @pytest.mark.parametrize("table", list(TABLES))
    def test_primary_keys(self, db, table):
        keys = [name for name, row in _table_info(db, table).items() if row[3]]
        pk = TABLES[table].primary_key
        assert keys == ([pk.name] if pk is not None else [])

    def test_account_id_defaults_to_sequence(self, db):
        info = _table_info(db, "accounts")
        assert "accounts_account_id_seq" in info["account_id"][2]

    def test_no_foreign_keys(self, db):
        count = db.execute(
            "SELECT COUNT(*) FROM duckdb_constraints() "
            "WHERE constraint_type = 'FOREIGN KEY'"
        ).fetchone()
        assert count == (0,)
