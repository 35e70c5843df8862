"""Example commands for shfuncs.

Each command declares the boolean flags and value options it accepts and
selects exactly one output from the parsed invocation. Commands keep no state
between runs, so the same arguments always produce the same output.
"""

import sys
from pathlib import Path

from .argument_processor import ArgumentProcessor, ParsedInvocation
from .command_executor import CommandExecutor
from .environment_helper import debug_log
from .exceptions import ExecutableNotFoundError, InvalidArgumentError
from .types import ArgsList, ExitCode, FlagMap, OptionMap


class Command:
    """Base class for a command with help text and option parsing."""

    name = ""
    summary = ""
    usage = ""
    flags: FlagMap = {}
    options: OptionMap = {}

    def run(self, args: ArgsList) -> ExitCode:
        """Parse ``args`` and run the command, returning its exit code."""
        debug_log(f"{self.name}.run: args={args}")
        try:
            parsed = ArgumentProcessor.parse(args, self.flags, self.options)
        except InvalidArgumentError as e:
            print(e.message, file=sys.stderr)
            return 1

        if parsed.help_requested:
            self.print_usage()
            return 0

        return self.execute(parsed)

    def print_usage(self) -> None:
        print(self.usage, end="")

    def execute(self, parsed: ParsedInvocation) -> ExitCode:
        """Act on a parsed, non-help invocation; subclasses must override."""
        raise NotImplementedError


class GreetingCommand(Command):
    """A command that prints a single greeting line."""

    def render(self, parsed: ParsedInvocation) -> str:
        """Return the greeting line to print; subclasses must override."""
        raise NotImplementedError

    def execute(self, parsed: ParsedInvocation) -> ExitCode:
        print(self.render(parsed))
        return 0


class HelloCommand(GreetingCommand):
    """Simple command with help / usage."""

    name = "hello"
    summary = "Say 'hello'."
    usage = """Usage:
  hello
  hello -h | --help

Options:
  -h --help  Display this usage information.

Description:
  Say 'hello'.
"""

    def render(self, parsed: ParsedInvocation) -> str:
        return "Hello."


class HiCommand(GreetingCommand):
    """Command with help / usage and a boolean flag."""

    name = "hi"
    summary = "Say 'hi'."
    usage = """Usage:
  hi
  hi --all
  hi -h | --help

Options:
  --all      Say 'hi' to everyone.
  -h --help  Display this usage information.

Description:
  Say 'hi'.
"""
    flags = {"--all": "all"}

    def render(self, parsed: ParsedInvocation) -> str:
        if parsed.has_flag("all"):
            return "Hi, everyone!"
        return "Hi!"


class HeyCommand(GreetingCommand):
    """Command with help / usage and a boolean flag accepted at any position."""

    name = "hey"
    summary = "Say 'hey'."
    usage = """Usage:
  hey
  hey --all
  hey -h | --help

Options:
  --all      Say 'hey' to everyone.
  -h --help  Display this usage information.

Description:
  Say 'hey'.
"""
    flags = {"--all": "all"}

    def render(self, parsed: ParsedInvocation) -> str:
        if parsed.has_flag("all"):
            return "Hey, everyone!"
        return "Hey!"


class SupCommand(GreetingCommand):
    """Command with a boolean flag and an option that takes a value.

    An explicit ``--to`` name takes precedence over ``--all``.
    """

    name = "sup"
    summary = "Say 'sup'."
    usage = """Usage:
  sup
  sup --all
  sup -h | --help
  sup (-t | --to) <name>

Options:
  --all                   Say 'sup' to everyone.
  -h --help               Display this usage information.
  -t <name> --to <name>   Say 'sup' to <name>.

Description:
  Say 'sup'.
"""
    flags = {"-a": "all", "--all": "all"}
    options = {"-t": "to", "--to": "to"}

    def render(self, parsed: ParsedInvocation) -> str:
        name = parsed.get_option("to")
        if name:
            return f"Sup, {name}!"
        if parsed.has_flag("all"):
            return "Sup, everyone!"
        return "Sup!"


class YesWrapper(Command):
    """Wrapper for the system `yes` executable adding help and a quiet flag.

    The wrapped executable is passed in at construction time; ``None`` means it
    could not be found, which is only an error once the wrapper actually runs.
    """

    name = "yes"
    summary = "Output <expletive> or 'y' forever."
    usage = """Usage:
  yes [<expletive>]
  yes --quiet
  yes -h | --help

Options:
  --quiet    Suppress output.
  -h --help  Display this usage information.

Description:
  A wrapper for `yes`, which outputs <expletive> or, by default, 'y' forever.
  For more information, run `man yes`.
"""
    flags = {"--quiet": "quiet"}

    def __init__(self, command_path: Path | str | None):
        self.command_path = command_path

    def execute(self, parsed: ParsedInvocation) -> ExitCode:
        if not self.command_path:
            raise ExecutableNotFoundError("yes")
        return CommandExecutor.execute_wrapped(
            self.command_path, parsed.positionals, quiet=parsed.has_flag("quiet")
        )
