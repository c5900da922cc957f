"""Render the struct template.

Takes the context from context_builder and produces the Go source text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "struct.go.j2"


def make_environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render(context: dict[str, Any]) -> str:
    """Render the struct template to a string."""
    template = make_environment().get_template(TEMPLATE_NAME)
    return template.render(**context)
