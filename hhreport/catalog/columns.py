"""Column and table descriptors for the household reporting catalog.

A ``TableSpec`` is the declared shape of one persisted table: its ordered
columns and the columns the store assigns on insert. The descriptors are
pure data and carry no behavior beyond lookups.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColumnType(Enum):
    """Semantic column types used by the catalog."""

    TEXT = "text"
    INTEGER = "integer"
    SERIAL = "serial"
    DECIMAL = "decimal"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class Column:
    """A single persisted column.

    Attributes:
        name: Column name as stored.
        type: Semantic column type.
        attr: Attribute name on the record dataclasses. Defaults to
            ``name``; differs only where the stored name is not a valid
            Python identifier (``1_month``, ``return``).
        precision: Total digits for decimal columns, if declared.
        scale: Fractional digits for decimal columns, if declared.
        nullable: Whether NULL is allowed.
        primary_key: Whether the column is the table's primary key.

    """

    name: str
    type: ColumnType
    attr: str = ""
    precision: int | None = None
    scale: int | None = None
    nullable: bool = False
    primary_key: bool = False

    def __post_init__(self) -> None:
        """Default the attribute name to the column name."""
        if not self.attr:
            object.__setattr__(self, "attr", self.name)


@dataclass(frozen=True)
class TableSpec:
    """Declared shape of a persisted table.

    Attributes:
        name: Table name.
        columns: Columns in declaration order.
        server_assigned: Names of columns excluded from the insert shape.

    """

    name: str
    columns: tuple[Column, ...]
    server_assigned: frozenset[str] = frozenset()

    def column(self, name: str) -> Column:
        """Look up a column by its stored name.

        Raises:
            KeyError: If the table has no such column.

        """
        for col in self.columns:
            if col.name == name:
                return col
        msg = f"{self.name} has no column '{name}'"
        raise KeyError(msg)

    @property
    def insert_columns(self) -> tuple[Column, ...]:
        """Columns a caller supplies on insert, in declaration order."""
        return tuple(c for c in self.columns if c.name not in self.server_assigned)

    @property
    def primary_key(self) -> Column | None:
        for col in self.columns:
            if col.primary_key:
                return col
        return None


def text(name: str, *, nullable: bool = False, primary_key: bool = False) -> Column:
    return Column(name, ColumnType.TEXT, nullable=nullable, primary_key=primary_key)


def integer(name: str) -> Column:
    return Column(name, ColumnType.INTEGER)


def money(name: str, attr: str = "") -> Column:
    """A ``decimal(10, 2)`` not-null column."""
    return Column(name, ColumnType.DECIMAL, attr=attr, precision=10, scale=2)


def timestamp(name: str) -> Column:
    return Column(name, ColumnType.TIMESTAMP)
