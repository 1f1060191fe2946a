"""Household data store — DuckDB insert/fetch for catalog records.

Moves validated catalog records in and out of the reporting tables.
Rows come back as the catalog's selected-row dataclasses.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from hhreport.catalog.models import ROW_TYPES
from hhreport.catalog.tables import get_table
from hhreport.catalog.validation import coerce_value, validate_insert, validate_row

if TYPE_CHECKING:
    import duckdb

    from hhreport.catalog.columns import TableSpec

logger = logging.getLogger(__name__)


def _new_household_id() -> str:
    """Generate a random 16-hex-character household ID."""
    return uuid.uuid4().hex[:16]


def _quote(name: str) -> str:
    return f'"{name}"'


def _insert(
    conn: duckdb.DuckDBPyConnection,
    spec: TableSpec,
    values: dict[str, Any],
) -> Any:
    columns = [c.name for c in spec.columns if c.name in values]
    placeholders = ", ".join("?" for _ in columns)
    query = (
        f"INSERT INTO {spec.name} ({', '.join(_quote(c) for c in columns)}) "  # noqa: S608
        f"VALUES ({placeholders}) RETURNING *"
    )
    row = conn.execute(query, [values[c] for c in columns]).fetchone()
    names = [desc[0] for desc in conn.description]
    return _to_record(spec, names, row)


def _to_record(spec: TableSpec, names: list[str], row: tuple[Any, ...]) -> Any:
    by_column = dict(zip(names, row, strict=True))
    return ROW_TYPES[spec.name](
        **{col.attr: by_column[col.name] for col in spec.columns},
    )


def insert_record(
    conn: duckdb.DuckDBPyConnection,
    table: str,
    candidate: Any,
    **assigned: Any,
) -> Any:
    """Validate and insert a new row.

    Server-assigned columns are filled in here: ``accounts.account_id``
    from its sequence, and ``household.hh_id`` as a fresh random id
    unless passed explicitly. ``hhmaster.hh_id`` must be passed via
    ``assigned`` as the id of the household the profile belongs to.
    ``hhperformance."return"`` must also be passed via ``assigned``;
    without one the store rejects the row as a NOT NULL violation.

    Args:
        conn: Active DuckDB connection.
        table: Target table name.
        candidate: Insert candidate keyed by column name.
        **assigned: Values for server-assigned columns, keyed by column name.

    Returns:
        The stored row as the table's selected-row record.

    Raises:
        ValueError: If the table is unknown, an assigned column is not
            server-assigned or has an invalid value, or an hhmaster row
            comes without its hh_id.
        ValidationError: If the candidate is rejected.

    """
    spec = get_table(table)
    record = validate_insert(table, candidate)

    unknown = set(assigned) - spec.server_assigned
    if unknown:
        msg = f"Not server-assigned on {table}: {sorted(unknown)}"
        raise ValueError(msg)

    values = record.to_dict()
    for name, value in assigned.items():
        values[name] = coerce_value(spec.column(name), value)

    if table == "household" and "hh_id" not in values:
        values["hh_id"] = _new_household_id()
    if table == "hhmaster" and "hh_id" not in values:
        msg = "hhmaster rows need the hh_id of their household"
        raise ValueError(msg)

    stored = _insert(conn, spec, values)
    logger.info("Inserted %s row: %s", table, _row_label(spec, stored))
    return stored


def insert_row(
    conn: duckdb.DuckDBPyConnection,
    table: str,
    row: Any,
) -> Any:
    """Insert a complete row, server-assigned columns included.

    Used when loading rows that already carry their keys.

    Raises:
        ValueError: If the table is unknown.
        ValidationError: If the row is rejected.

    """
    spec = get_table(table)
    record = validate_row(table, row)
    stored = _insert(conn, spec, record.to_dict())
    logger.info("Loaded %s row: %s", table, _row_label(spec, stored))
    return stored


def _row_label(spec: TableSpec, record: Any) -> str:
    pk = spec.primary_key
    if pk is not None:
        return f"{pk.name}={getattr(record, pk.attr)}"
    return f"hh_id={record.hh_id}"


def fetch_rows(
    conn: duckdb.DuckDBPyConnection,
    table: str,
    hh_id: str | None = None,
) -> list[Any]:
    """Get rows of a table, optionally filtered by household.

    Args:
        conn: Active DuckDB connection.
        table: Table name.
        hh_id: Optional household filter.

    Returns:
        List of selected-row records in insertion order.

    Raises:
        ValueError: If the table is unknown.

    """
    spec = get_table(table)
    query = f"SELECT * FROM {spec.name}"  # noqa: S608
    params: list[Any] = []

    if hh_id is not None:
        query += " WHERE hh_id = ?"
        params.append(hh_id)

    query += " ORDER BY rowid"

    result = conn.execute(query, params).fetchall()
    names = [desc[0] for desc in conn.description]
    return [_to_record(spec, names, row) for row in result]
