"""Table declarations for household reporting data.

Eight tables, in declaration order:
- positions: Security holdings within an account
- hhflows: Household flow-of-funds returns by period
- accounts: Accounts under a household
- hhperformance: Household return by period label
- household: Household totals
- hhmaster: Household contact profile
- hhmonthlyperformance: Household monthly return and ending value
- hhtransactions: Account activity events

Known layout quirks are kept as declared so the catalog stays compatible
with stored data:
- hhperformance."return" is the primary key, a decimal(18, 3).
- positions.description and hhmaster.zip_code are timestamps.
- Several numeric-looking columns (units, gain/loss, quantity, unit
  price, 10-year return, income since inception) are free text.
- account/household references are not foreign keys.

"""

from __future__ import annotations

from hhreport.catalog.columns import (
    Column,
    ColumnType,
    TableSpec,
    integer,
    money,
    text,
    timestamp,
)

# ── Positions ──

POSITIONS = TableSpec(
    name="positions",
    columns=(
        text("hh_id"),
        integer("date_of_date"),
        integer("account_id"),
        text("account_name"),
        text("symbol"),
        timestamp("description"),
        money("_of_units", attr="of_units"),
        money("cost_price"),
        money("position_cost_basis"),
        money("close_price"),
        money("position_market_value"),
        text("position_income_since_inception"),
        money("position_unrealized_gl"),
        text("asset_class"),
        text("classification"),
    ),
)

# ── Household Flows ──

HHFLOWS = TableSpec(
    name="hhflows",
    columns=(
        text("hh_id"),
        text("household_name"),
        text("attribute"),
        money("1_month", attr="one_month"),
        money("3_months", attr="three_months"),
        money("ytd"),
        money("1_year", attr="one_year"),
        money("3_years", attr="three_years"),
        money("5_years", attr="five_years"),
        Column("10_years", ColumnType.TEXT, attr="ten_years"),
        money("inception"),
        integer("sort_index"),
    ),
)

# ── Accounts ──

ACCOUNTS = TableSpec(
    name="accounts",
    columns=(
        text("hh_id"),
        integer("date_of_date"),
        Column("account_id", ColumnType.SERIAL, primary_key=True),
        text("account_name"),
        text("account_type"),
        money("account_cost_basis"),
        money("account_total_value"),
        money("account_unrealized_gl"),
        money("account_income_on_current_positions"),
        integer("account_opening_date"),
        integer("account_inception_date"),
        text("fee_plans"),
    ),
    server_assigned=frozenset({"account_id"}),
)

# ── Household Performance ──

HHPERFORMANCE = TableSpec(
    name="hhperformance",
    columns=(
        text("hh_id"),
        text("household_name"),
        text("period"),
        Column(
            "return",
            ColumnType.DECIMAL,
            attr="return_",
            precision=18,
            scale=3,
            primary_key=True,
        ),
    ),
    server_assigned=frozenset({"return"}),
)

# ── Household ──

HOUSEHOLD = TableSpec(
    name="household",
    columns=(
        text("hh_id", primary_key=True),
        text("household_name"),
        money("hh_cost_basis"),
        money("hh_unrealized_gl"),
        money("hh_income_on_current_positions"),
        money("hh_total_value"),
    ),
    server_assigned=frozenset({"hh_id"}),
)

# ── Household Master ──

HHMASTER = TableSpec(
    name="hhmaster",
    columns=(
        text("hh_id", primary_key=True),
        text("household_name"),
        text("address"),
        text("city"),
        text("state"),
        timestamp("zip_code"),
        text("phone"),
        text("email"),
    ),
    server_assigned=frozenset({"hh_id"}),
)

# ── Household Monthly Performance ──

HHMONTHLYPERFORMANCE = TableSpec(
    name="hhmonthlyperformance",
    columns=(
        text("hh_id"),
        text("household_name"),
        integer("period"),
        money("return", attr="return_"),
        money("ending_value"),
    ),
)

# ── Household Transactions ──

HHTRANSACTIONS = TableSpec(
    name="hhtransactions",
    columns=(
        text("hh_id"),
        text("household_name"),
        integer("account_id"),
        text("account_name"),
        text("activity_type"),
        text("description"),
        text("gainloss_"),
        integer("process_date"),
        text("quantity"),
        text("security_description", nullable=True),
        text("symbol_cusip_or_code", nullable=True),
        money("total_amount"),
        integer("trade_date"),
        text("unit_price"),
    ),
)

# All tables in declaration order
TABLES: dict[str, TableSpec] = {
    spec.name: spec
    for spec in (
        POSITIONS,
        HHFLOWS,
        ACCOUNTS,
        HHPERFORMANCE,
        HOUSEHOLD,
        HHMASTER,
        HHMONTHLYPERFORMANCE,
        HHTRANSACTIONS,
    )
}


def get_table(name: str) -> TableSpec:
    """Return the spec for a table.

    Raises:
        ValueError: If the table is not part of the catalog.

    """
    if name not in TABLES:
        msg = f"Unknown table: {name}. Known tables: {sorted(TABLES)}"
        raise ValueError(msg)
    return TABLES[name]
