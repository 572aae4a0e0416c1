"""Coordinator tests: discovery, presentation and launch wired together."""

from __future__ import annotations

import io
import tempfile
import time
import unittest
from contextlib import contextmanager
from pathlib import Path
from unittest import mock

from lazylauncher.app import launch_command, list_matches, run_launcher
from lazylauncher.errors import LaunchError
from lazylauncher.launch import DEFAULT_EXIT_CODE, LAUNCH_FAILURE_EXIT_CODE
from lazylauncher.ui_theme import PLAIN_THEME


class _FakeTerminal:
    def __init__(self, *_args) -> None:
        pass

    @contextmanager
    def raw_mode(self):
        yield

    def write(self, _text: str) -> None:
        pass


def _keys_then_enter(query: str, max_enters: int = 400):
    yield from query
    for _ in range(max_enters):
        time.sleep(0.005)
        yield "ENTER"
    yield "ESC"


def _write_apps(root: Path) -> None:
    (root / "firefox.desktop").write_text(
        "Name=Firefox\nComment=Browse the web\nExec=firefox %u\n", encoding="utf-8"
    )
    (root / "hidden.desktop").write_text("Name=Hidden\nExec=hidden\nNoDisplay=true\n", encoding="utf-8")
    (root / "sub").mkdir()
    (root / "sub" / "terminal.desktop").write_text("Name=Terminal\nExec=xterm\n", encoding="utf-8")


class LaunchCommandTests(unittest.TestCase):
    def test_no_command_returns_default_exit_code(self) -> None:
        with mock.patch("lazylauncher.app.spawn") as spawn:
            self.assertEqual(launch_command(None), DEFAULT_EXIT_CODE)
        spawn.assert_not_called()

    def test_exit_code_of_child_is_propagated(self) -> None:
        with mock.patch("lazylauncher.app.spawn", return_value=42):
            self.assertEqual(launch_command("app"), 42)

    def test_launch_failure_is_reported_not_raised(self) -> None:
        stderr = io.StringIO()
        error = LaunchError("spawn", "missing-app", FileNotFoundError("missing-app"))
        with mock.patch("lazylauncher.app.spawn", side_effect=error):
            code = launch_command("missing-app", stderr=stderr)

        self.assertEqual(code, LAUNCH_FAILURE_EXIT_CODE)
        self.assertIn("missing-app", stderr.getvalue())


class ListMatchesTests(unittest.TestCase):
    def test_lists_visible_entries_ranked(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write_apps(root)

            everything = list_matches([root], "")
            ranked = list_matches([root], "term")

        self.assertEqual([m.key for m in everything], ["Firefox|Browse the web", "Terminal"])
        self.assertEqual([m.entry.exec for m in ranked], ["xterm"])


class RunLauncherTests(unittest.TestCase):
    def test_commit_launches_selected_command_and_returns_its_status(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write_apps(root)
            with (
                mock.patch("lazylauncher.app.TerminalController", _FakeTerminal),
                mock.patch("lazylauncher.loop.read_key", side_effect=_keys_then_enter("ffx")),
                mock.patch("lazylauncher.app.spawn", return_value=7) as spawn,
            ):
                code = run_launcher([root], PLAIN_THEME, stdin_fd=0, stdout_fd=1)

        spawn.assert_called_once_with("firefox %u")
        self.assertEqual(code, 7)

    def test_cancel_returns_default_code_without_launching(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with (
                mock.patch("lazylauncher.app.TerminalController", _FakeTerminal),
                mock.patch("lazylauncher.loop.read_key", side_effect=["ENTER", "ESC"]),
                mock.patch("lazylauncher.app.spawn") as spawn,
            ):
                code = run_launcher([Path(tmp)], PLAIN_THEME, stdin_fd=0, stdout_fd=1)

        spawn.assert_not_called()
        self.assertEqual(code, DEFAULT_EXIT_CODE)

    def test_presentation_failure_is_reraised_after_release(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with (
                mock.patch("lazylauncher.app.TerminalController", _FakeTerminal),
                mock.patch("lazylauncher.loop.read_key", side_effect=OSError("tty gone")),
                mock.patch("lazylauncher.app.spawn") as spawn,
            ):
                with self.assertRaises(OSError):
                    run_launcher([Path(tmp)], PLAIN_THEME, stdin_fd=0, stdout_fd=1)

        spawn.assert_not_called()


if __name__ == "__main__":
    unittest.main()
