#!/usr/bin/env python3
"""Main application orchestrator for shfuncs."""

import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

from .argument_processor import HELP_FLAGS
from .commands import (
    Command,
    HeyCommand,
    HelloCommand,
    HiCommand,
    SupCommand,
    YesWrapper,
)
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import ShfuncsError, UnknownCommandError
from .path_helper import PathHelper
from .types import ArgsList, ExitCode


def print_help(commands: Iterable[Command]) -> None:
    """Print concise help message listing the available commands."""
    lines = [
        "shfuncs - example commands with help, flags and options",
        "Usage:",
        "  shfuncs <command> [options]",
        "  shfuncs <command> -h | --help",
        "",
        "Commands:",
    ]
    for command in commands:
        lines.append(f"  {command.name:<8}{command.summary}")
    lines.append("")
    lines.append("  Supports SHFUNCS_DEBUG=1 and SHFUNCS_YES_COMMAND=/path/to/yes")
    print("\n".join(lines))


def resolve_yes_command() -> Optional[Path]:
    """Locate the executable wrapped by the `yes` command."""
    override = EnvironmentHelper.get_yes_command_override()
    if override:
        override_path = Path(override)
        if PathHelper.is_executable_file(override_path):
            return override_path
        debug_log(f"resolve_yes_command: ignoring non-executable {override}")
        return None
    return PathHelper.find_executable("yes")


def build_commands(yes_command: Optional[Path]) -> list[Command]:
    return [
        HelloCommand(),
        HiCommand(),
        HeyCommand(),
        SupCommand(),
        YesWrapper(yes_command),
    ]


class Application:
    """Dispatches a command line to the registered command."""

    def __init__(self, commands: Iterable[Command]):
        self.commands = {command.name: command for command in commands}

    def get_command(self, name: str) -> Command:
        try:
            return self.commands[name]
        except KeyError:
            raise UnknownCommandError(name) from None

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        if not args or args[0] in HELP_FLAGS:
            print_help(self.commands.values())
            return 0

        name, rest = args[0], args[1:]
        try:
            return self.get_command(name).run(rest)
        except ShfuncsError as e:
            logging.error(str(e))
            return 1


def initialize() -> Application:
    """Set up the application; called once at program startup."""
    yes_command = resolve_yes_command()
    debug_log(f"initialize: yes command resolved to {yes_command}")
    debug_log("Hello World.")
    return Application(build_commands(yes_command))


def silence_stdout() -> None:
    """Point stdout at the null device so the interpreter's final flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = initialize()
        return app.run(sys.argv[1:])
    except BrokenPipeError:
        # Reader closed our stdout (e.g. `shfuncs yes | head`); stop quietly.
        debug_log("main: stdout closed by reader")
        silence_stdout()
        return 0
    except ShfuncsError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
