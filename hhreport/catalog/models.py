"""Record shapes for household reporting tables.

Each table has two explicit record types:
- the selected row (``Household``), every column as read from the store
- the insertable row (``InsertHousehold``), the columns a caller supplies
  when creating a row; server-assigned columns are absent

Field names follow the stored column names except where those are not
valid identifiers (``1_month`` -> ``one_month``, ``return`` -> ``return_``).

"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar

from hhreport.catalog.tables import TABLES


class _Record:
    """Shared helpers for catalog records."""

    __table__: ClassVar[str]

    def to_dict(self) -> dict[str, Any]:
        """Return the record keyed by stored column names."""
        return {
            col.name: getattr(self, col.attr)
            for col in TABLES[self.__table__].columns
            if hasattr(self, col.attr)
        }


# ── Positions ──


@dataclass(frozen=True, kw_only=True)
class InsertPositions(_Record):
    __table__: ClassVar[str] = "positions"

    hh_id: str
    date_of_date: int
    account_id: int
    account_name: str
    symbol: str
    description: datetime
    of_units: Decimal
    cost_price: Decimal
    position_cost_basis: Decimal
    close_price: Decimal
    position_market_value: Decimal
    position_income_since_inception: str
    position_unrealized_gl: Decimal
    asset_class: str
    classification: str


@dataclass(frozen=True, kw_only=True)
class Positions(_Record):
    """A position row. No server-assigned columns."""

    __table__: ClassVar[str] = "positions"

    hh_id: str
    date_of_date: int
    account_id: int
    account_name: str
    symbol: str
    description: datetime
    of_units: Decimal
    cost_price: Decimal
    position_cost_basis: Decimal
    close_price: Decimal
    position_market_value: Decimal
    position_income_since_inception: str
    position_unrealized_gl: Decimal
    asset_class: str
    classification: str


# ── Household Flows ──


@dataclass(frozen=True, kw_only=True)
class InsertHhflows(_Record):
    __table__: ClassVar[str] = "hhflows"

    hh_id: str
    household_name: str
    attribute: str
    one_month: Decimal
    three_months: Decimal
    ytd: Decimal
    one_year: Decimal
    three_years: Decimal
    five_years: Decimal
    ten_years: str
    inception: Decimal
    sort_index: int


@dataclass(frozen=True, kw_only=True)
class Hhflows(_Record):
    """A flow-of-funds row. No server-assigned columns."""

    __table__: ClassVar[str] = "hhflows"

    hh_id: str
    household_name: str
    attribute: str
    one_month: Decimal
    three_months: Decimal
    ytd: Decimal
    one_year: Decimal
    three_years: Decimal
    five_years: Decimal
    ten_years: str
    inception: Decimal
    sort_index: int


# ── Accounts ──


@dataclass(frozen=True, kw_only=True)
class InsertAccounts(_Record):
    __table__: ClassVar[str] = "accounts"

    hh_id: str
    date_of_date: int
    account_name: str
    account_type: str
    account_cost_basis: Decimal
    account_total_value: Decimal
    account_unrealized_gl: Decimal
    account_income_on_current_positions: Decimal
    account_opening_date: int
    account_inception_date: int
    fee_plans: str


@dataclass(frozen=True, kw_only=True)
class Accounts(_Record):
    """An account row as stored, including the sequence-assigned id."""

    __table__: ClassVar[str] = "accounts"

    hh_id: str
    date_of_date: int
    account_id: int
    account_name: str
    account_type: str
    account_cost_basis: Decimal
    account_total_value: Decimal
    account_unrealized_gl: Decimal
    account_income_on_current_positions: Decimal
    account_opening_date: int
    account_inception_date: int
    fee_plans: str


# ── Household Performance ──


@dataclass(frozen=True, kw_only=True)
class InsertHhperformance(_Record):
    __table__: ClassVar[str] = "hhperformance"

    hh_id: str
    household_name: str
    period: str


@dataclass(frozen=True, kw_only=True)
class Hhperformance(_Record):
    """A performance row. ``return_`` is the table's primary key."""

    __table__: ClassVar[str] = "hhperformance"

    hh_id: str
    household_name: str
    period: str
    return_: Decimal


# ── Household ──


@dataclass(frozen=True, kw_only=True)
class InsertHousehold(_Record):
    __table__: ClassVar[str] = "household"

    household_name: str
    hh_cost_basis: Decimal
    hh_unrealized_gl: Decimal
    hh_income_on_current_positions: Decimal
    hh_total_value: Decimal


@dataclass(frozen=True, kw_only=True)
class Household(_Record):
    __table__: ClassVar[str] = "household"

    hh_id: str
    household_name: str
    hh_cost_basis: Decimal
    hh_unrealized_gl: Decimal
    hh_income_on_current_positions: Decimal
    hh_total_value: Decimal


# ── Household Master ──


@dataclass(frozen=True, kw_only=True)
class InsertHhmaster(_Record):
    __table__: ClassVar[str] = "hhmaster"

    household_name: str
    address: str
    city: str
    state: str
    zip_code: datetime
    phone: str
    email: str


@dataclass(frozen=True, kw_only=True)
class Hhmaster(_Record):
    __table__: ClassVar[str] = "hhmaster"

    hh_id: str
    household_name: str
    address: str
    city: str
    state: str
    zip_code: datetime
    phone: str
    email: str


# ── Household Monthly Performance ──


@dataclass(frozen=True, kw_only=True)
class InsertHhmonthlyperformance(_Record):
    __table__: ClassVar[str] = "hhmonthlyperformance"

    hh_id: str
    household_name: str
    period: int
    return_: Decimal
    ending_value: Decimal


@dataclass(frozen=True, kw_only=True)
class Hhmonthlyperformance(_Record):
    """A monthly performance row. No server-assigned columns."""

    __table__: ClassVar[str] = "hhmonthlyperformance"

    hh_id: str
    household_name: str
    period: int
    return_: Decimal
    ending_value: Decimal


# ── Household Transactions ──


@dataclass(frozen=True, kw_only=True)
class InsertHhtransactions(_Record):
    __table__: ClassVar[str] = "hhtransactions"

    hh_id: str
    household_name: str
    account_id: int
    account_name: str
    activity_type: str
    description: str
    gainloss_: str
    process_date: int
    quantity: str
    security_description: str | None = None
    symbol_cusip_or_code: str | None = None
    total_amount: Decimal
    trade_date: int
    unit_price: str


@dataclass(frozen=True, kw_only=True)
class Hhtransactions(_Record):
    __table__: ClassVar[str] = "hhtransactions"

    hh_id: str
    household_name: str
    account_id: int
    account_name: str
    activity_type: str
    description: str
    gainloss_: str
    process_date: int
    quantity: str
    security_description: str | None
    symbol_cusip_or_code: str | None
    total_amount: Decimal
    trade_date: int
    unit_price: str


ROW_TYPES: dict[str, type[_Record]] = {
    "positions": Positions,
    "hhflows": Hhflows,
    "accounts": Accounts,
    "hhperformance": Hhperformance,
    "household": Household,
    "hhmaster": Hhmaster,
    "hhmonthlyperformance": Hhmonthlyperformance,
    "hhtransactions": Hhtransactions,
}

INSERT_TYPES: dict[str, type[_Record]] = {
    "positions": InsertPositions,
    "hhflows": InsertHhflows,
    "accounts": InsertAccounts,
    "hhperformance": InsertHhperformance,
    "household": InsertHousehold,
    "hhmaster": InsertHhmaster,
    "hhmonthlyperformance": InsertHhmonthlyperformance,
    "hhtransactions": InsertHhtransactions,
}
