"""Execution of wrapped commands for shfuncs."""

import selectors
import shlex
import subprocess
import sys
from pathlib import Path
from typing import BinaryIO, cast

from .environment_helper import debug_log
from .types import ArgsList, ExitCode

INTERRUPTED_EXIT_CODE = 130


class CommandExecutor:
    """Handles running a wrapped executable and forwarding its output."""

    @staticmethod
    def run_nonblocking(cmd: ArgsList, quiet: bool = False) -> ExitCode:
        """Execute command with non-blocking I/O, forwarding stdout/stderr in real-time.

        Output is forwarded as raw bytes, so it reaches the caller unchanged
        whatever its encoding. With ``quiet`` the child's stdout goes to the
        null device and only its stderr is forwarded.

        If forwarding stops early (interrupt, or the reader of our stdout
        going away) the child is terminated and reaped before returning or
        re-raising.
        """
        process = subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL if quiet else subprocess.PIPE,
            stderr=subprocess.PIPE,
            bufsize=0,
        )

        sel = selectors.DefaultSelector()
        fileobjs = [process.stdout, process.stderr]
        for fileobj in fileobjs:
            if fileobj:
                sel.register(cast(BinaryIO, fileobj), selectors.EVENT_READ)

        completed = False
        try:
            while sel.get_map():
                for key, _ in sel.select():
                    fileobj: BinaryIO = cast(BinaryIO, key.fileobj)
                    try:
                        line = fileobj.readline()
                        if not line:
                            sel.unregister(fileobj)
                            continue
                    except OSError:
                        sel.unregister(fileobj)
                        continue

                    target = sys.stdout if fileobj is process.stdout else sys.stderr
                    target.buffer.write(line)
                    target.buffer.flush()
            completed = True
        except KeyboardInterrupt:
            debug_log(f"run_nonblocking: interrupted, terminating pid {process.pid}")
            return INTERRUPTED_EXIT_CODE
        finally:
            sel.close()
            if not completed:
                process.terminate()
                process.wait()

        return process.wait()

    @staticmethod
    def format_command(args: ArgsList) -> str:
        """Build a shell-quoted, printable command string from arguments."""
        if not args:
            return ""
        return " ".join(shlex.quote(arg) for arg in args)

    @staticmethod
    def execute_wrapped(
        executable: Path | str, args: ArgsList, quiet: bool = False
    ) -> ExitCode:
        """Run ``executable`` with ``args`` and return its exit code."""
        cmd = [str(executable)] + list(args)
        debug_log(
            f"execute_wrapped: command={CommandExecutor.format_command(cmd)}, quiet={quiet}"
        )
        return CommandExecutor.run_nonblocking(cmd, quiet=quiet)
