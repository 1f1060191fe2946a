"""DuckDB schema definitions for hhreport.

Contains DDL statements for all household reporting tables:
- positions: Security holdings per account
- hhflows: Household flow-of-funds returns by period
- accounts: Accounts under a household (sequence-assigned id)
- hhperformance: Household return by period label
- household: Household totals
- hhmaster: Household contact profile
- hhmonthlyperformance: Household monthly performance
- hhtransactions: Account activity events

The layout must stay in step with ``hhreport.catalog.tables``.

"""

from __future__ import annotations

# ── Positions ──

CREATE_POSITIONS = """
CREATE TABLE IF NOT EXISTS positions (
    hh_id                            VARCHAR NOT NULL,
    date_of_date                     INTEGER NOT NULL,
    account_id                       INTEGER NOT NULL,
    account_name                     VARCHAR NOT NULL,
    symbol                           VARCHAR NOT NULL,
    description                      TIMESTAMP NOT NULL,
    _of_units                        DECIMAL(10, 2) NOT NULL,
    cost_price                       DECIMAL(10, 2) NOT NULL,
    position_cost_basis              DECIMAL(10, 2) NOT NULL,
    close_price                      DECIMAL(10, 2) NOT NULL,
    position_market_value            DECIMAL(10, 2) NOT NULL,
    position_income_since_inception  VARCHAR NOT NULL,
    position_unrealized_gl           DECIMAL(10, 2) NOT NULL,
    asset_class                      VARCHAR NOT NULL,
    classification                   VARCHAR NOT NULL
);
"""

# ── Household Flows ──

CREATE_HHFLOWS = """
CREATE TABLE IF NOT EXISTS hhflows (
    hh_id           VARCHAR NOT NULL,
    household_name  VARCHAR NOT NULL,
    attribute       VARCHAR NOT NULL,
    "1_month"       DECIMAL(10, 2) NOT NULL,
    "3_months"      DECIMAL(10, 2) NOT NULL,
    ytd             DECIMAL(10, 2) NOT NULL,
    "1_year"        DECIMAL(10, 2) NOT NULL,
    "3_years"       DECIMAL(10, 2) NOT NULL,
    "5_years"       DECIMAL(10, 2) NOT NULL,
    "10_years"      VARCHAR NOT NULL,
    inception       DECIMAL(10, 2) NOT NULL,
    sort_index      INTEGER NOT NULL
);
"""

# ── Accounts ──

# Stands in for a serial column
CREATE_ACCOUNT_ID_SEQUENCE = """
CREATE SEQUENCE IF NOT EXISTS accounts_account_id_seq START 1;
"""

CREATE_ACCOUNTS = """
CREATE TABLE IF NOT EXISTS accounts (
    hh_id                                VARCHAR NOT NULL,
    date_of_date                         INTEGER NOT NULL,
    account_id                           INTEGER NOT NULL PRIMARY KEY
                                         DEFAULT nextval('accounts_account_id_seq'),
    account_name                         VARCHAR NOT NULL,
    account_type                         VARCHAR NOT NULL,
    account_cost_basis                   DECIMAL(10, 2) NOT NULL,
    account_total_value                  DECIMAL(10, 2) NOT NULL,
    account_unrealized_gl                DECIMAL(10, 2) NOT NULL,
    account_income_on_current_positions  DECIMAL(10, 2) NOT NULL,
    account_opening_date                 INTEGER NOT NULL,
    account_inception_date               INTEGER NOT NULL,
    fee_plans                            VARCHAR NOT NULL
);
"""

# ── Household Performance ──

# "return" is the primary key; equal returns collide. Width is the DuckDB
# default for a bare DECIMAL, spelled out.
CREATE_HHPERFORMANCE = """
CREATE TABLE IF NOT EXISTS hhperformance (
    hh_id           VARCHAR NOT NULL,
    household_name  VARCHAR NOT NULL,
    period          VARCHAR NOT NULL,
    "return"        DECIMAL(18, 3) NOT NULL PRIMARY KEY
);
"""

# ── Household ──

CREATE_HOUSEHOLD = """
CREATE TABLE IF NOT EXISTS household (
    hh_id                           VARCHAR NOT NULL PRIMARY KEY,
    household_name                  VARCHAR NOT NULL,
    hh_cost_basis                   DECIMAL(10, 2) NOT NULL,
    hh_unrealized_gl                DECIMAL(10, 2) NOT NULL,
    hh_income_on_current_positions  DECIMAL(10, 2) NOT NULL,
    hh_total_value                  DECIMAL(10, 2) NOT NULL
);
"""

# ── Household Master ──

CREATE_HHMASTER = """
CREATE TABLE IF NOT EXISTS hhmaster (
    hh_id           VARCHAR NOT NULL PRIMARY KEY,
    household_name  VARCHAR NOT NULL,
    address         VARCHAR NOT NULL,
    city            VARCHAR NOT NULL,
    state           VARCHAR NOT NULL,
    zip_code        TIMESTAMP NOT NULL,
    phone           VARCHAR NOT NULL,
    email           VARCHAR NOT NULL
);
"""

# ── Household Monthly Performance ──

CREATE_HHMONTHLYPERFORMANCE = """
CREATE TABLE IF NOT EXISTS hhmonthlyperformance (
    hh_id           VARCHAR NOT NULL,
    household_name  VARCHAR NOT NULL,
    period          INTEGER NOT NULL,
    "return"        DECIMAL(10, 2) NOT NULL,
    ending_value    DECIMAL(10, 2) NOT NULL
);
"""

# ── Household Transactions ──

CREATE_HHTRANSACTIONS = """
CREATE TABLE IF NOT EXISTS hhtransactions (
    hh_id                 VARCHAR NOT NULL,
    household_name        VARCHAR NOT NULL,
    account_id            INTEGER NOT NULL,
    account_name          VARCHAR NOT NULL,
    activity_type         VARCHAR NOT NULL,
    description           VARCHAR NOT NULL,
    gainloss_             VARCHAR NOT NULL,
    process_date          INTEGER NOT NULL,
    quantity              VARCHAR NOT NULL,
    security_description  VARCHAR,
    symbol_cusip_or_code  VARCHAR,
    total_amount          DECIMAL(10, 2) NOT NULL,
    trade_date            INTEGER NOT NULL,
    unit_price            VARCHAR NOT NULL
);
"""

# All DDL statements in creation order (sequence first)
ALL_TABLES: list[str] = [
    CREATE_ACCOUNT_ID_SEQUENCE,
    CREATE_POSITIONS,
    CREATE_HHFLOWS,
    CREATE_ACCOUNTS,
    CREATE_HHPERFORMANCE,
    CREATE_HOUSEHOLD,
    CREATE_HHMASTER,
    CREATE_HHMONTHLYPERFORMANCE,
    CREATE_HHTRANSACTIONS,
]
