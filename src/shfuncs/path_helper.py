"""Path operations for shfuncs."""

import os
from pathlib import Path


class PathHelper:
    """Utility class for path operations."""

    @staticmethod
    def find_executable(name: str) -> Path | None:
        """Return the first executable called ``name`` on PATH."""
        path = os.environ.get("PATH", "")
        if not path:
            return None

        for path_dir in path.split(os.pathsep):
            if PathHelper._is_valid_path_directory(path_dir):
                executable_path = Path(path_dir) / name
                if PathHelper.is_executable_file(executable_path):
                    return executable_path
        return None

    @staticmethod
    def is_executable_file(executable_path: Path) -> bool:
        """Check if path exists, is a regular file and is executable."""
        return (
            executable_path.exists()
            and executable_path.is_file()
            and os.access(executable_path, os.X_OK)
        )

    @staticmethod
    def _is_valid_path_directory(path_dir: str) -> bool:
        """Check if path directory is valid."""
        return bool(path_dir) and Path(path_dir).is_dir()
