"""Argument parsing functionality for shfuncs."""

from typing import Optional

from .exceptions import InvalidArgumentError
from .types import ArgsList, FlagMap, FlagSet, OptionMap, OptionValues

HELP_FLAGS = ("-h", "--help")


class ParsedInvocation:
    """Result of interpreting the tokens of a single command invocation."""

    def __init__(
        self,
        help_requested: bool = False,
        boolean_flags: Optional[FlagSet] = None,
        value_options: Optional[OptionValues] = None,
        positionals: Optional[ArgsList] = None,
    ):
        self.help_requested = help_requested
        self.boolean_flags = boolean_flags if boolean_flags is not None else set()
        self.value_options = value_options if value_options is not None else {}
        self.positionals = positionals if positionals is not None else []

    def has_flag(self, name: str) -> bool:
        return name in self.boolean_flags

    def get_option(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.value_options.get(name, default)

    def __eq__(self, other):
        if not isinstance(other, ParsedInvocation):
            return NotImplemented
        return (
            self.help_requested == other.help_requested
            and self.boolean_flags == other.boolean_flags
            and self.value_options == other.value_options
            and self.positionals == other.positionals
        )

    def __repr__(self):
        return (
            f"ParsedInvocation(help_requested={self.help_requested!r}, "
            f"boolean_flags={self.boolean_flags!r}, "
            f"value_options={self.value_options!r}, "
            f"positionals={self.positionals!r})"
        )


class ArgumentProcessor:
    """Handles argument classification for the example commands."""

    @staticmethod
    def is_help_requested(args: ArgsList) -> bool:
        """Check for -h/--help at any position."""
        return any(arg in HELP_FLAGS for arg in args)

    @staticmethod
    def is_valid_value(value: Optional[str]) -> bool:
        """A value is valid when it is non-empty and does not look like an option."""
        return bool(value) and not value.startswith("-")

    @staticmethod
    def parse(
        args: ArgsList,
        flags: Optional[FlagMap] = None,
        options: Optional[OptionMap] = None,
    ) -> ParsedInvocation:
        """
        Classify ``args`` into help, boolean flags, value options and positionals.

        * A help token anywhere short-circuits parsing; nothing else is
          interpreted, so a malformed option next to ``--help`` is not an error.
        * ``flags`` maps accepted flag tokens to the canonical flag name.
        * ``options`` maps accepted value-option tokens to the canonical option
          name. The token following the option is consumed as its value, and
          ``--option=value`` is accepted for long options.
        * Anything else is kept, in order, as a positional.

        Raises:
            InvalidArgumentError: If a value option has no value, or its value
                starts with ``-``.
        """
        flags = flags or {}
        options = options or {}

        if ArgumentProcessor.is_help_requested(args):
            return ParsedInvocation(help_requested=True)

        parsed = ParsedInvocation()
        i = 0
        while i < len(args):
            arg = args[i]

            if arg in flags:
                parsed.boolean_flags.add(flags[arg])
                i += 1
                continue

            if arg in options:
                value = args[i + 1] if i + 1 < len(args) else None
                if not ArgumentProcessor.is_valid_value(value):
                    raise InvalidArgumentError(arg, value)
                parsed.value_options[options[arg]] = value
                i += 2
                continue

            if arg.startswith("--") and "=" in arg:
                option, value = arg.split("=", 1)
                if option in options:
                    if not ArgumentProcessor.is_valid_value(value):
                        raise InvalidArgumentError(option, value)
                    parsed.value_options[options[option]] = value
                    i += 1
                    continue

            parsed.positionals.append(arg)
            i += 1

        return parsed
