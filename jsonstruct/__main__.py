"""Entry point: python -m jsonstruct [flags] < input.json

Reads a JSON object from stdin, prints a Go struct for it on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Sequence, TextIO

from .codegen import render
from .config import parse_config
from .context_builder import build_context
from .loader import decode_object, read_input

logger = logging.getLogger(__name__)


def main(
    argv: Sequence[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run one generation pass and return the process exit status."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    config = parse_config(argv)
    for warning in config.conflicts():
        logger.warning(warning)

    try:
        content = read_input(stdin)
    except OSError as exc:
        logger.error("can't read from stdin: %s", exc)
        return 1

    try:
        fields = decode_object(content)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    context = build_context(fields, config)
    output = render(context)
    logger.debug("rendered %s with %d fields", config.struct_name, context["field_count"])

    if stdout is not None:
        stdout.write(output)
    else:
        # UTF-8 regardless of the locale's encoding
        sys.stdout.flush()
        sys.stdout.buffer.write(output.encode("utf-8"))
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
