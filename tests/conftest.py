"""Shared pytest fixtures for hhreport tests."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from hhreport.db.connection import init_memory_db

# One valid insert candidate per table, server-assigned columns omitted.
INSERT_CANDIDATES: dict[str, dict[str, Any]] = {
    "positions": {
        "hh_id": "HH001",
        "date_of_date": 20240131,
        "account_id": 1,
        "account_name": "Smith Joint Brokerage",
        "symbol": "VTI",
        "description": "2024-01-31T00:00:00",
        "_of_units": "150.00",
        "cost_price": "180.25",
        "position_cost_basis": "27037.50",
        "close_price": "236.40",
        "position_market_value": "35460.00",
        "position_income_since_inception": "1204.33",
        "position_unrealized_gl": "8422.50",
        "asset_class": "Equity",
        "classification": "US Total Market",
    },
    "hhflows": {
        "hh_id": "HH001",
        "household_name": "Smith Family",
        "attribute": "Net Flows",
        "1_month": "1.25",
        "3_months": "3.10",
        "ytd": "4.75",
        "1_year": "9.80",
        "3_years": "6.40",
        "5_years": "7.15",
        "10_years": "8.02",
        "inception": "7.90",
        "sort_index": 1,
    },
    "accounts": {
        "hh_id": "HH001",
        "date_of_date": 20240131,
        "account_name": "Smith Joint Brokerage",
        "account_type": "Joint",
        "account_cost_basis": "60000.00",
        "account_total_value": "64250.00",
        "account_unrealized_gl": "4250.00",
        "account_income_on_current_positions": "180.00",
        "account_opening_date": 20150301,
        "account_inception_date": 20150315,
        "fee_plans": "Advisory 1%",
    },
    "hhperformance": {
        "hh_id": "HH001",
        "household_name": "Smith Family",
        "period": "1 Year",
    },
    "household": {
        "household_name": "Smith Family",
        "hh_cost_basis": "100000.00",
        "hh_unrealized_gl": "2500.00",
        "hh_income_on_current_positions": "300.00",
        "hh_total_value": "102500.00",
    },
    "hhmaster": {
        "household_name": "Smith Family",
        "address": "12 Elm Street",
        "city": "Springfield",
        "state": "IL",
        "zip_code": datetime(2024, 1, 1),
        "phone": "555-0100",
        "email": "smith@example.com",
    },
    "hhmonthlyperformance": {
        "hh_id": "HH001",
        "household_name": "Smith Family",
        "period": 202401,
        "return": "1.85",
        "ending_value": "102500.00",
    },
    "hhtransactions": {
        "hh_id": "HH001",
        "household_name": "Smith Family",
        "account_id": 1,
        "account_name": "Smith Joint Brokerage",
        "activity_type": "Buy",
        "description": "Bought 10 VTI",
        "gainloss_": "0",
        "process_date": 20240116,
        "quantity": "10",
        "security_description": "Vanguard Total Stock Market ETF",
        "symbol_cusip_or_code": "VTI",
        "total_amount": "-2364.00",
        "trade_date": 20240115,
        "unit_price": "236.40",
    },
}


@pytest.fixture
def candidates() -> dict[str, dict[str, Any]]:
    """Provide a fresh copy of the valid insert candidates."""
    return {table: dict(values) for table, values in INSERT_CANDIDATES.items()}


@pytest.fixture
def db():
    conn = init_memory_db()
    yield conn
    conn.close()
