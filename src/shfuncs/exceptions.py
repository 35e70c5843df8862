"""Custom exceptions for shfuncs."""


class ShfuncsError(Exception):
    """Base exception for shfuncs errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgumentError(ShfuncsError):
    """Raised when a value-option is missing its value or is given an invalid one."""

    def __init__(self, option: str, value: str | None = None):
        super().__init__(f"{option} requires a valid argument.")
        self.option = option
        self.value = value


class UnknownCommandError(ShfuncsError):
    """Raised when no command is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown command '{name}'")
        self.name = name


class ExecutableNotFoundError(ShfuncsError):
    """Raised when required executable cannot be found."""

    def __init__(self, executable: str):
        super().__init__(f"Required executable '{executable}' not found in PATH")
        self.executable = executable
