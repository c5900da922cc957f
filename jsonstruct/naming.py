"""Convert snake_case JSON keys to Go identifiers.

Pattern: split on underscores, upper-case the first character of every
segment, join.
  - uc_first=True  -> PascalCase (exported)
  - uc_first=False -> first segment copied as-is (unexported)

Examples:
  user_name,  True  -> UserName
  user_name,  False -> userName
  __id,       True  -> Id
  HTTP_code,  False -> HTTPCode
"""

from __future__ import annotations


def _to_upper(char: str) -> str:
    """Upper-case one character, leaving it alone when it has no single-character form ('ß')."""
    mapped = char.upper()
    return mapped if len(mapped) == 1 else char


def _to_lower(char: str) -> str:
    """Lower-case one character; 'İ' lowers to 'i' plus a combining dot, keep the 'i'."""
    return char.lower()[:1]


def _upper_first(segment: str) -> str:
    """Upper-case the first character only; str.capitalize() would lower the rest."""
    return _to_upper(segment[:1]) + segment[1:]


def to_camel_case(name: str, uc_first: bool) -> str:
    """Build an identifier from a snake_case name."""
    output = ""
    for index, segment in enumerate(name.split("_")):
        if not segment:
            continue
        if index == 0 and not uc_first:
            output += segment
            continue
        output += _upper_first(segment)
    return output


def receiver_name(struct_name: str) -> str:
    """Method receiver for a struct: its first character, lower-cased."""
    if not struct_name:
        raise ValueError("struct name must not be empty")
    return _to_lower(struct_name[0])
