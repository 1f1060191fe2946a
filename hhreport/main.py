"""hhreport sidecar entry point.

Exposes the schema catalog to a host process via stdin/stdout using
newline-delimited JSON messages.

Protocol:
    Request:  {"id": "uuid", "method": "string", "params": {}}
    Response: {"id": "uuid", "result": {}}
    Error:    {"id": "uuid", "error": {"message": "string", "errors": [...]}}

``errors`` is present only for validation failures.
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime
from decimal import Decimal
from typing import Any

from hhreport import log_config
from hhreport.catalog.tables import TABLES, get_table
from hhreport.catalog.validation import ValidationError, validate_insert

logger = logging.getLogger(__name__)


class _RecordEncoder(json.JSONEncoder):
    """JSON encoder that handles Decimal and datetime values.

    Anything else that reaches it is a rejected input echoed back in a
    validation error, and is sent as its repr.
    """

    def default(self, o: Any) -> Any:
        """Convert catalog value types to JSON-safe values."""
        if isinstance(o, Decimal):
            return str(o)
        if isinstance(o, datetime):
            return o.isoformat()
        return repr(o)


def _list_tables() -> list[str]:
    return list(TABLES)


def _describe_table(table: str) -> dict[str, Any]:
    """Describe a table's columns and insert shape."""
    spec = get_table(table)
    pk = spec.primary_key
    return {
        "name": spec.name,
        "primary_key": pk.name if pk is not None else None,
        "server_assigned": sorted(spec.server_assigned),
        "columns": [
            {
                "name": col.name,
                "type": col.type.value,
                "precision": col.precision,
                "scale": col.scale,
                "nullable": col.nullable,
            }
            for col in spec.columns
        ],
        "insert_columns": [col.name for col in spec.insert_columns],
    }


def _validate_insert(table: str, data: Any) -> dict[str, Any]:
    return validate_insert(table, data).to_dict()


def dispatch(method: str, params: dict[str, Any]) -> Any:
    """Route a method call to the appropriate handler.

    Args:
        method: The method name (e.g., "catalog.validate_insert").
        params: The parameters for the method.

    Returns:
        The result of the method call.

    Raises:
        ValueError: If the method is not recognized.

    """
    handlers: dict[str, Any] = {
        "catalog.tables": _list_tables,
        "catalog.describe": _describe_table,
        "catalog.validate_insert": _validate_insert,
    }
    if method not in handlers:
        msg = f"Unknown method: {method}"
        raise ValueError(msg)
    return handlers[method](**params)


def _error_body(exc: Exception) -> dict[str, Any]:
    body: dict[str, Any] = {
        "message": str(exc),
        "traceback": traceback.format_exc(),
    }
    if isinstance(exc, ValidationError):
        body["errors"] = exc.errors
    return body


def main() -> None:
    """Run the sidecar message loop.

    Reads newline-delimited JSON from stdin, dispatches to handlers,
    and writes JSON responses to stdout. Runs until stdin is closed.
    """
    log_config.setup()
    logger.info("hhreport sidecar started with %d tables", len(TABLES))

    for raw_line in sys.stdin:
        stripped = raw_line.strip()
        if not stripped:
            continue

        request: dict[str, Any] = {}
        try:
            request = json.loads(stripped)
            request_id = request.get("id", "unknown")
            method = request["method"]
            params = request.get("params", {})
            result = dispatch(method, params)
            response: dict[str, Any] = {"id": request_id, "result": result}
        except Exception as exc:  # noqa: BLE001 — dispatcher must catch all errors and return them as JSON
            request_id = (
                request.get("id", "unknown") if isinstance(request, dict) else "unknown"
            )
            logger.debug("Request %s failed: %s", request_id, exc)
            response = {"id": request_id, "error": _error_body(exc)}
        sys.stdout.write(json.dumps(response, cls=_RecordEncoder) + "\n")
        sys.stdout.flush()


if __name__ == "__main__":
    main()
