"""Insert validation for household reporting tables.

Candidates arrive as plain dicts keyed by stored column names (the common
exchange format across hhreport). Validation checks presence, semantic
type, and declared decimal precision/scale for every column of the target
shape and reports all violations at once rather than stopping at the
first one.

Keys outside the target shape, including server-assigned columns on an
insert candidate, are ignored.

"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from hhreport.catalog.columns import Column, ColumnType, TableSpec
from hhreport.catalog.models import (
    INSERT_TYPES,
    ROW_TYPES,
    InsertAccounts,
    InsertHhflows,
    InsertHhmaster,
    InsertHhmonthlyperformance,
    InsertHhperformance,
    InsertHhtransactions,
    InsertHousehold,
    InsertPositions,
)
from hhreport.catalog.tables import get_table

# Signed 32-bit range of integer/serial columns
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_MISSING = object()


class ValidationError(ValueError):
    """A candidate row was rejected.

    Attributes:
        table: Target table name.
        errors: One dict per violation with keys: field, issue, value.

    """

    def __init__(self, table: str, errors: list[dict[str, Any]]) -> None:
        self.table = table
        self.errors = errors
        detail = "; ".join(f"{e['field']}: {e['issue']}" for e in errors)
        super().__init__(f"Invalid {table} record: {detail}")

    @property
    def fields(self) -> list[str]:
        """Names of the offending columns, in report order."""
        return [e["field"] for e in self.errors]


class _ColumnError(Exception):
    def __init__(self, issue: str) -> None:
        super().__init__(issue)
        self.issue = issue


def _coerce_text(value: Any) -> str:
    if not isinstance(value, str):
        msg = f"Expected text, got {type(value).__name__}"
        raise _ColumnError(msg)
    return value


def _coerce_integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Expected integer, got {type(value).__name__}"
        raise _ColumnError(msg)
    if not _INT_MIN <= value <= _INT_MAX:
        msg = "Integer outside 32-bit range"
        raise _ColumnError(msg)
    return value


def _coerce_decimal(value: Any, precision: int | None, scale: int | None) -> Decimal:
    """Convert a value to Decimal and enforce precision/scale.

    Values are never rounded: a value with too many fractional digits is
    rejected, not quantized.

    """
    if isinstance(value, bool) or not isinstance(value, str | int | float | Decimal):
        msg = f"Expected decimal, got {type(value).__name__}"
        raise _ColumnError(msg)

    raw = str(value).strip() if isinstance(value, str | float) else value
    try:
        number = Decimal(raw)
    except InvalidOperation:
        msg = "Not a valid decimal number"
        raise _ColumnError(msg) from None
    if not number.is_finite():
        msg = "Decimal must be finite"
        raise _ColumnError(msg)

    if precision is not None and scale is not None:
        parts = number.as_tuple()
        exponent = int(parts.exponent)
        n_digits = len(parts.digits)
        frac_digits = max(0, -exponent)
        int_digits = max(0, n_digits + exponent)
        if frac_digits > scale:
            msg = f"More than {scale} fractional digits"
            raise _ColumnError(msg)
        if int_digits > precision - scale:
            msg = f"More than {precision - scale} integer digits (precision {precision})"
            raise _ColumnError(msg)
    return number


def _coerce_timestamp(value: Any) -> datetime:
    """Convert a value to a naive datetime.

    Timestamp columns carry no time zone, so values with an offset are
    rejected rather than shifted.

    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            msg = "Not an ISO-8601 timestamp"
            raise _ColumnError(msg) from None
    if not isinstance(value, datetime):
        msg = f"Expected timestamp, got {type(value).__name__}"
        raise _ColumnError(msg)
    if value.tzinfo is not None:
        msg = "Timestamp must not carry a time zone"
        raise _ColumnError(msg)
    return value


def coerce_value(column: Column, value: Any) -> Any:
    """Coerce one value for a column.

    Args:
        column: Target column.
        value: Raw input value. ``None`` is allowed only on nullable columns.

    Returns:
        The value as the column's Python type.

    Raises:
        ValueError: With a short description of the violation.

    """
    try:
        return _coerce(column, value)
    except _ColumnError as exc:
        msg = f"{column.name}: {exc.issue}"
        raise ValueError(msg) from None


def _coerce(column: Column, value: Any) -> Any:
    if value is None or value is _MISSING:
        if column.nullable:
            return None
        msg = "Required field is missing"
        raise _ColumnError(msg)

    if column.type is ColumnType.TEXT:
        return _coerce_text(value)
    if column.type in (ColumnType.INTEGER, ColumnType.SERIAL):
        return _coerce_integer(value)
    if column.type is ColumnType.DECIMAL:
        return _coerce_decimal(value, column.precision, column.scale)
    return _coerce_timestamp(value)


def _validate(
    spec: TableSpec,
    columns: tuple[Column, ...],
    data: Any,
    record_type: type,
) -> Any:
    if not isinstance(data, Mapping):
        raise ValidationError(
            spec.name,
            [
                {
                    "field": "*",
                    "issue": f"Expected a mapping, got {type(data).__name__}",
                    "value": None,
                }
            ],
        )

    values: dict[str, Any] = {}
    errors: list[dict[str, Any]] = []
    for col in columns:
        raw = data.get(col.name, _MISSING)
        try:
            values[col.attr] = _coerce(col, raw)
        except _ColumnError as exc:
            errors.append(
                {
                    "field": col.name,
                    "issue": exc.issue,
                    "value": None if raw is _MISSING else raw,
                }
            )

    if errors:
        raise ValidationError(spec.name, errors)
    return record_type(**values)


def validate_insert(table: str, data: Any) -> Any:
    """Validate an insert candidate for a table.

    Args:
        table: Target table name.
        data: Untyped candidate, normally a dict keyed by column name.

    Returns:
        The table's insert record (e.g. ``InsertHousehold``).

    Raises:
        ValueError: If the table is unknown.
        ValidationError: If any insertable column is missing, mistyped,
            or out of declared precision/scale.

    """
    spec = get_table(table)
    return _validate(spec, spec.insert_columns, data, INSERT_TYPES[table])


def validate_row(table: str, data: Any) -> Any:
    """Validate a complete row, server-assigned columns included.

    Returns:
        The table's selected-row record (e.g. ``Household``).

    Raises:
        ValueError: If the table is unknown.
        ValidationError: If any column is missing, mistyped, or out of
            declared precision/scale.

    """
    spec = get_table(table)
    return _validate(spec, spec.columns, data, ROW_TYPES[table])


def validate_insert_positions(data: Any) -> InsertPositions:
    return validate_insert("positions", data)


def validate_insert_hhflows(data: Any) -> InsertHhflows:
    return validate_insert("hhflows", data)


def validate_insert_accounts(data: Any) -> InsertAccounts:
    return validate_insert("accounts", data)


def validate_insert_hhperformance(data: Any) -> InsertHhperformance:
    return validate_insert("hhperformance", data)


def validate_insert_household(data: Any) -> InsertHousehold:
    return validate_insert("household", data)


def validate_insert_hhmaster(data: Any) -> InsertHhmaster:
    return validate_insert("hhmaster", data)


def validate_insert_hhmonthlyperformance(data: Any) -> InsertHhmonthlyperformance:
    return validate_insert("hhmonthlyperformance", data)


def validate_insert_hhtransactions(data: Any) -> InsertHhtransactions:
    return validate_insert("hhtransactions", data)
