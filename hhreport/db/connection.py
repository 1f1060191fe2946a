"""DuckDB connection management for hhreport.

Handles database initialization, schema creation, and connection
lifecycle. The household database lives at::

    ~/.hhreport/
      data/
        household.duckdb

Set ``HHREPORT_DATA_DIR`` to move the data directory.

"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import duckdb

from hhreport.db.schema import ALL_TABLES

logger = logging.getLogger(__name__)

_DB_FILENAME = "household.duckdb"


def default_data_dir() -> Path:
    """Return the data directory, honoring ``HHREPORT_DATA_DIR``."""
    override = os.environ.get("HHREPORT_DATA_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".hhreport" / "data"


def get_connection(
    db_path: str | Path | None = None,
    read_only: bool = False,
) -> duckdb.DuckDBPyConnection:
    """Open a DuckDB connection.

    Args:
        db_path: Path to the .duckdb file. If None, uses in-memory database.
        read_only: Open in read-only mode.

    Returns:
        Active DuckDB connection.

    """
    if db_path is None:
        return duckdb.connect(":memory:")

    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return duckdb.connect(str(path), read_only=read_only)


def _apply_schema(conn: duckdb.DuckDBPyConnection) -> None:
    for ddl in ALL_TABLES:
        conn.execute(ddl)


def init_household_db(
    db_path: str | Path | None = None,
) -> duckdb.DuckDBPyConnection:
    """Initialize the household database with schema.

    Creates all eight reporting tables and the account id sequence.
    Safe to call on an existing database.

    Args:
        db_path: Path to the household.duckdb file.
            Defaults to ``default_data_dir() / "household.duckdb"``.

    Returns:
        Initialized DuckDB connection.

    """
    if db_path is None:
        db_path = default_data_dir() / _DB_FILENAME

    conn = get_connection(db_path)
    _apply_schema(conn)
    logger.info("Household database initialized at %s", db_path)
    return conn


def init_memory_db() -> duckdb.DuckDBPyConnection:
    """Create an in-memory database with full schema.

    Useful for testing and ephemeral operations.

    """
    conn = get_connection(None)
    _apply_schema(conn)
    return conn
