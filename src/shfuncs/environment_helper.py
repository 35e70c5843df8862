"""Environment variable operations for shfuncs."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when SHFUNCS_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug output was requested via SHFUNCS_DEBUG."""
        return os.environ.get("SHFUNCS_DEBUG", "").lower() in TRUTHY_VALUES

    @staticmethod
    def get_yes_command_override() -> str | None:
        """Get the explicit path of the wrapped `yes` executable, if configured."""
        override = os.environ.get("SHFUNCS_YES_COMMAND", "").strip()
        return override or None
