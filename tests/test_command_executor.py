"""Tests for the command execution functionality in shfuncs."""

import io
import os
import subprocess
from types import SimpleNamespace

import pytest

from shfuncs.command_executor import INTERRUPTED_EXIT_CODE, CommandExecutor


class TestCommandExecutorUnit:
    """Unit tests for the CommandExecutor class."""

    def test_run_nonblocking_with_mocked_subprocess(self, mocker):
        mock_process = mocker.MagicMock()
        mock_process.wait.return_value = 0

        mock_selector = mocker.MagicMock()
        mock_selector.get_map.return_value = []

        mock_popen = mocker.patch("subprocess.Popen", return_value=mock_process)
        mocker.patch("selectors.DefaultSelector", return_value=mock_selector)

        result = CommandExecutor.run_nonblocking(["yes", "x"])

        assert result == 0
        args, kwargs = mock_popen.call_args
        assert args[0] == ["yes", "x"]
        assert kwargs["stdout"] == subprocess.PIPE
        assert kwargs["stderr"] == subprocess.PIPE
        assert "shell" not in kwargs
        assert "text" not in kwargs
        mock_selector.close.assert_called_once()
        mock_process.terminate.assert_not_called()

    def test_run_nonblocking_quiet_uses_devnull(self, mocker):
        mock_process = mocker.MagicMock()
        mock_process.stdout = None
        mock_process.wait.return_value = 0

        mock_selector = mocker.MagicMock()
        mock_selector.get_map.return_value = []

        mock_popen = mocker.patch("subprocess.Popen", return_value=mock_process)
        mocker.patch("selectors.DefaultSelector", return_value=mock_selector)

        CommandExecutor.run_nonblocking(["yes"], quiet=True)

        _, kwargs = mock_popen.call_args
        assert kwargs["stdout"] == subprocess.DEVNULL
        mock_selector.register.assert_called_once()

    def test_run_nonblocking_interrupt_terminates_child(self, mocker):
        mock_process = mocker.MagicMock()
        mock_selector = mocker.MagicMock()
        mock_selector.get_map.return_value = [object()]
        mock_selector.select.side_effect = KeyboardInterrupt

        mocker.patch("subprocess.Popen", return_value=mock_process)
        mocker.patch("selectors.DefaultSelector", return_value=mock_selector)

        result = CommandExecutor.run_nonblocking(["yes"])

        assert result == INTERRUPTED_EXIT_CODE
        mock_process.terminate.assert_called_once()
        mock_process.wait.assert_called_once()
        mock_selector.close.assert_called_once()

    def test_run_nonblocking_broken_pipe_stops_child(self, mocker):
        mock_process = mocker.MagicMock()
        mock_process.stdout.readline.return_value = b"y\n"

        key = SimpleNamespace(fileobj=mock_process.stdout)
        mock_selector = mocker.MagicMock()
        mock_selector.get_map.return_value = [key]
        mock_selector.select.return_value = [(key, None)]

        closed_buffer = mocker.MagicMock()
        closed_buffer.write.side_effect = BrokenPipeError
        mocker.patch("sys.stdout", SimpleNamespace(buffer=closed_buffer))
        mocker.patch("subprocess.Popen", return_value=mock_process)
        mocker.patch("selectors.DefaultSelector", return_value=mock_selector)

        with pytest.raises(BrokenPipeError):
            CommandExecutor.run_nonblocking(["yes"])

        mock_process.terminate.assert_called_once()
        mock_process.wait.assert_called_once()
        mock_selector.close.assert_called_once()

    def test_run_nonblocking_passes_non_utf8_bytes_through(self, mocker, fake_yes):
        out = SimpleNamespace(buffer=io.BytesIO())
        err = SimpleNamespace(buffer=io.BytesIO())
        mocker.patch("sys.stdout", out)
        mocker.patch("sys.stderr", err)

        result = CommandExecutor.run_nonblocking([str(fake_yes), os.fsdecode(b"\xff")])

        assert result == 0
        assert out.buffer.getvalue() == b"\xff\n\xff\n"
        assert err.buffer.getvalue() == b"stderr line\n"

    def test_run_nonblocking_real_process(self, capsys, fake_yes):
        result = CommandExecutor.run_nonblocking([str(fake_yes), "ok"])
        captured = capsys.readouterr()
        assert result == 0
        assert captured.out == "ok\nok\n"
        assert captured.err == "stderr line\n"

    def test_run_nonblocking_propagates_exit_code(self, tmp_path):
        script = tmp_path / "fail"
        script.write_text("#!/bin/sh\nexit 7\n")
        script.chmod(0o755)
        assert CommandExecutor.run_nonblocking([str(script)]) == 7

    @pytest.mark.parametrize(
        "args,expected",
        [
            ([], ""),
            (["yes"], "yes"),
            (["/usr/bin/yes", "damn"], "/usr/bin/yes damn"),
            (["yes", "two words"], "yes 'two words'"),
            (["yes", "it's"], "yes 'it'\"'\"'s'"),
        ],
    )
    def test_format_command(self, args, expected):
        assert CommandExecutor.format_command(args) == expected

    def test_execute_wrapped_builds_command(self, mock_run_nonblocking, tmp_path):
        executable = tmp_path / "yes"
        result = CommandExecutor.execute_wrapped(executable, ["a", "b"], quiet=True)
        assert result == 0
        mock_run_nonblocking.assert_called_once_with(
            [str(executable), "a", "b"], quiet=True
        )

    def test_execute_wrapped_logs_command_when_debugging(
        self, capsys, monkeypatch, mock_run_nonblocking
    ):
        monkeypatch.setenv("SHFUNCS_DEBUG", "1")
        CommandExecutor.execute_wrapped("/usr/bin/yes", ["two words"])
        captured = capsys.readouterr()
        assert "[DEBUG] execute_wrapped: command=/usr/bin/yes 'two words'" in captured.err
