"""Registration and lookup of command-line arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class ArgumentError(RuntimeError):
    """Raised when an argument is misused or cannot be resolved."""


@dataclass(frozen=True)
class _Argument:
    short_form: bool
    additional_value: bool
    help_message: str

    def flag(self, name: str) -> str:
        return ("-" if self.short_form else "--") + name


class ConsoleParser:
    """Keeps registered arguments and answers questions about parsed ones."""

    def __init__(self) -> None:
        self._current: list[str] = []
        self._registered: dict[str, _Argument] = {}
        self._additional_help = ""

    def parse_arguments(self, argv: Iterable[str]) -> None:
        """Store the given arguments, dropping the program name in front."""
        self._current = list(argv)[1:]

    def reset(self) -> None:
        """Forget the parsed arguments and the registered ones."""
        self._current.clear()
        self._registered.clear()

    def register_argument(
        self,
        name: str,
        short_form: bool,
        additional_value: bool = False,
        help_message: str = "",
    ) -> None:
        """Register an argument expected as ``-name`` or ``--name``."""
        if name in self._registered:
            raise ArgumentError(f"Argument '{name}' was already registered!")
        self._registered[name] = _Argument(short_form, additional_value, help_message)

    def registered_arguments(self) -> list[str]:
        """Return every registered argument in the form it is expected."""
        return [arg.flag(name) for name, arg in self._registered.items()]

    def _lookup(self, name: str) -> _Argument:
        try:
            return self._registered[name]
        except KeyError:
            raise ArgumentError(f"Argument '{name}' has not been registered!") from None

    def is_argument_passed(self, name: str) -> bool:
        """Tell whether a registered argument appears among the parsed ones."""
        return self._lookup(name).flag(name) in self._current

    def additional_value(self, name: str) -> str:
        """Return the value that follows a registered argument."""
        arg = self._lookup(name)
        if not arg.additional_value:
            raise ArgumentError(
                f"Argument '{name}' has not been registered with additional value!"
            )
        flag = arg.flag(name)
        try:
            position = self._current.index(flag)
        except ValueError:
            raise ArgumentError(f"Argument '{name}' has not been passed!") from None
        if position + 1 >= len(self._current):
            raise ArgumentError(f"Argument '{name}' is missing its additional value!")
        return self._current[position + 1]

    def has_arguments(self) -> bool:
        """Tell whether any arguments were parsed."""
        return bool(self._current)

    def add_additional_help(self, text: str) -> None:
        """Append text to the help shown above the argument list."""
        self._additional_help += text

    def console_help(self) -> str:
        """Build the full help message."""
        lines = [self._additional_help, "Arguments that the app takes:"]
        lines.extend(
            f"\t{arg.flag(name)},\t\t\t{arg.help_message}"
            for name, arg in self._registered.items()
        )
        return "\n".join(lines) + "\n"