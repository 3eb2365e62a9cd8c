"""Example command that registers a few arguments and prints the help."""

from __future__ import annotations

import sys
from typing import Sequence

from consoleparse.parser import ConsoleParser


def build_parser() -> ConsoleParser:
    """Create the parser with the example arguments registered."""
    parser = ConsoleParser()
    parser.register_argument("long_arg_name", False, False, "Help message for the argument.")
    parser.register_argument(
        "short_arg", True, False, "This is the help of the short form argument!"
    )
    parser.register_argument(
        "additional_val_arg",
        False,
        True,
        "Help for the argument that takes an additional value.",
    )
    parser.add_additional_help("This is an additional help to the arguments!")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and print the help message."""
    args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    parser.parse_arguments(["consoleparse", *args])
    sys.stdout.write(parser.console_help())
    return 0


if __name__ == "__main__":
    sys.exit(main())