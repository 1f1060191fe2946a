"""Logging configuration for the hhreport sidecar.

Call ``setup()`` once at the top of ``main()``. Log lines carry ISO-8601
timestamps and go to stderr, since stdout carries JSON responses.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def setup(*, verbose: bool | None = None, stream: TextIO | None = None) -> None:
    """Configure the root logger for the sidecar.

    Args:
        verbose: DEBUG if True, INFO if False. When None, DEBUG is chosen
            if ``HHREPORT_VERBOSE`` is set to a non-empty value.
        stream: Log destination. Defaults to stderr.
    """
    if verbose is None:
        verbose = bool(os.environ.get("HHREPORT_VERBOSE"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=_LOG_FORMAT,
        datefmt=_DATE_FORMAT,
        stream=stream if stream is not None else sys.stderr,
    )
