"""Tests for the sidecar entry point (dispatch and message loop)."""

from __future__ import annotations

import json
from io import StringIO
from unittest.mock import patch

import pytest

from hhreport.catalog.validation import ValidationError
from hhreport.main import dispatch, main


def _run(*requests: str) -> list[dict]:
    stdin = StringIO("".join(r + "\n" for r in requests))
    stdout = StringIO()
    with patch("sys.stdin", stdin), patch("sys.stdout", stdout):
        main()
    return [json.loads(line) for line in stdout.getvalue().splitlines() if line]


class TestDispatch:
    """Tests for the dispatch function."""

    def test_unknown_method_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown method"):
            dispatch("nonexistent.method", {})

    def test_list_tables(self) -> None:
        tables = dispatch("catalog.tables", {})
        assert tables[0] == "positions"
        assert len(tables) == 8

    def test_describe_accounts(self) -> None:
        described = dispatch("catalog.describe", {"table": "accounts"})
        assert described["primary_key"] == "account_id"
        assert described["server_assigned"] == ["account_id"]
        assert "account_id" not in described["insert_columns"]
        cost_basis = next(
            c for c in described["columns"] if c["name"] == "account_cost_basis"
        )
        assert cost_basis == {
            "name": "account_cost_basis",
            "type": "decimal",
            "precision": 10,
            "scale": 2,
            "nullable": False,
        }

    def test_validate_insert(self, candidates) -> None:
        result = dispatch(
            "catalog.validate_insert",
            {"table": "household", "data": candidates["household"]},
        )
        assert result["household_name"] == "Smith Family"
        assert "hh_id" not in result

    def test_validate_insert_rejects(self) -> None:
        with pytest.raises(ValidationError):
            dispatch("catalog.validate_insert", {"table": "household", "data": {}})


class TestMain:
    """Tests for the stdin/stdout message loop."""

    def test_valid_request_returns_response(self, candidates) -> None:
        request = json.dumps(
            {
                "id": "1",
                "method": "catalog.validate_insert",
                "params": {"table": "household", "data": candidates["household"]},
            }
        )
        (response,) = _run(request)
        assert response["id"] == "1"
        # Decimals keep their scale on the wire
        assert response["result"]["hh_cost_basis"] == "100000.00"

    def test_timestamps_serialize_as_iso(self, candidates) -> None:
        data = {**candidates["positions"]}
        request = json.dumps(
            {
                "id": "t",
                "method": "catalog.validate_insert",
                "params": {"table": "positions", "data": data},
            }
        )
        (response,) = _run(request)
        assert response["result"]["description"] == "2024-01-31T00:00:00"

    def test_validation_error_lists_fields(self, candidates) -> None:
        data = {**candidates["accounts"]}
        del data["account_name"]
        request = json.dumps(
            {
                "id": "2",
                "method": "catalog.validate_insert",
                "params": {"table": "accounts", "data": data},
            }
        )
        (response,) = _run(request)
        assert response["id"] == "2"
        assert [e["field"] for e in response["error"]["errors"]] == ["account_name"]

    def test_invalid_json_returns_error(self) -> None:
        (response,) = _run("not valid json")
        assert response["id"] == "unknown"
        assert "error" in response
        assert "errors" not in response["error"]

    def test_missing_method_returns_error(self) -> None:
        (response,) = _run(json.dumps({"id": "3"}))
        assert response["id"] == "3"
        assert "error" in response

    def test_empty_lines_are_skipped(self) -> None:
        request = json.dumps({"id": "4", "method": "catalog.tables", "params": {}})
        responses = _run("", request, "")
        assert len(responses) == 1

    def test_dispatch_error_includes_traceback(self) -> None:
        request = json.dumps({"id": "5", "method": "bad", "params": {}})
        (response,) = _run(request)
        assert "traceback" in response["error"]
