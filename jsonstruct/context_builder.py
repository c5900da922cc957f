"""Build Jinja2 template context from decoded JSON fields.

Resolves each key's Go identifiers and type once, in document order, and
assembles the full context dict for struct.go.j2.
"""

from __future__ import annotations

from typing import Any

from .config import Config
from .naming import receiver_name, to_camel_case
from .type_inference import go_type


def build_field(key: str, value: Any, config: Config) -> dict[str, str]:
    """Describe one struct field and the accessor names derived from it."""
    return {
        "key": key,
        "name": to_camel_case(key, config.public),
        "method_name": to_camel_case(key, True),
        "param_name": to_camel_case(key, False),
        "type": go_type(value),
    }


def build_context(fields: dict[str, Any], config: Config) -> dict[str, Any]:
    """Build the full template context for one struct."""
    return {
        "package": config.package,
        "struct_name": config.struct_name,
        "receiver": receiver_name(config.struct_name),
        "constructor": config.constructor,
        "getters": config.getters,
        "setters": config.setters,
        "fields": [build_field(key, value, config) for key, value in fields.items()],
        "field_count": len(fields),
    }
