import stat
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys

    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


FAKE_YES_SCRIPT = """#!/bin/sh
word="${1:-y}"
echo "$word"
echo "$word"
echo "stderr line" >&2
exit 0
"""


@pytest.fixture
def fake_yes(tmp_path):
    """
    Fixture providing a finite stand-in for `yes`.

    The script prints its first argument (or 'y') twice on stdout, one line on
    stderr, and exits 0, so the wrapper can be exercised without running forever.
    """
    script = tmp_path / "yes"
    script.write_text(FAKE_YES_SCRIPT)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def mock_run_nonblocking(mocker):
    """Fixture that replaces process execution and returns 0."""
    return mocker.patch(
        "shfuncs.command_executor.CommandExecutor.run_nonblocking", return_value=0
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Fixture that removes shfuncs configuration variables from the environment."""
    monkeypatch.delenv("SHFUNCS_DEBUG", raising=False)
    monkeypatch.delenv("SHFUNCS_YES_COMMAND", raising=False)
    return monkeypatch
