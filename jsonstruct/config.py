"""Command-line configuration.

Flags mirror Go's flag package: single-dash long names, `-flag=value` or
`-flag value`, and bare boolean flags meaning true.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

# Spellings accepted by Go's strconv.ParseBool
_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


@dataclass(frozen=True)
class Config:
    struct_name: str = "Foo"
    public: bool = True
    getters: bool = False
    setters: bool = False
    constructor: bool = True
    package: str = "main"

    def conflicts(self) -> list[str]:
        """Warnings for settings that contradict each other."""
        warnings = []
        if self.public and self.getters:
            warnings.append("You can't have public variables and getters")
        return warnings


def parse_bool(text: str) -> bool:
    """Parse a boolean flag value."""
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def _non_empty(text: str) -> str:
    if not text:
        raise argparse.ArgumentTypeError("value must not be empty")
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonstruct",
        description="Read a JSON object from stdin and print a Go struct for it.",
        allow_abbrev=False,
    )
    defaults = Config()

    parser.add_argument(
        "-name", "--name", dest="struct_name", type=_non_empty,
        default=defaults.struct_name, metavar="string",
        help="Name for your struct (default: %(default)s)",
    )
    for flag, help_text in (
        ("public", "make variables public"),
        ("getters", "make getters"),
        ("setters", "make setters"),
        ("constructor", "make a constructor with empty arguments"),
    ):
        parser.add_argument(
            f"-{flag}", f"--{flag}", dest=flag, type=parse_bool,
            nargs="?", const=True, default=getattr(defaults, flag),
            metavar="bool", help=f"{help_text} (default: %(default)s)",
        )
    parser.add_argument(
        "-package", "--package", dest="package", type=_non_empty,
        default=defaults.package, metavar="string",
        help="package name (default: %(default)s)",
    )
    return parser


def parse_config(argv: Sequence[str] | None = None) -> Config:
    """Build a Config from command-line arguments (sys.argv when None)."""
    args = build_parser().parse_args(argv)
    return Config(
        struct_name=args.struct_name,
        public=args.public,
        getters=args.getters,
        setters=args.setters,
        constructor=args.constructor,
        package=args.package,
    )
