"""Shared fixtures for jsonstruct tests.

The CLI fixture runs main() in-process with in-memory stdin/stdout so tests
can assert on the exit status and the generated text together.
"""

from __future__ import annotations

import io
import json
from typing import Any, Callable

import pytest

from jsonstruct.__main__ import main


# ---------------------------------------------------------------------------
# CLI runner: feeds bytes to stdin, captures stdout
# ---------------------------------------------------------------------------

@pytest.fixture
def run_cli() -> Callable[..., tuple[int, str]]:
    """Return a callable that runs the CLI and yields (exit status, stdout).

    Usage in tests::

        status, out = run_cli({"age": 42}, "-getters", "-public=false")
    """
    def _run(payload: Any, *argv: str) -> tuple[int, str]:
        if isinstance(payload, bytes):
            data = payload
        elif isinstance(payload, str):
            data = payload.encode("utf-8")
        else:
            data = json.dumps(payload).encode("utf-8")
        stdout = io.StringIO()
        status = main(list(argv), stdin=io.BytesIO(data), stdout=stdout)
        return status, stdout.getvalue()
    return _run
