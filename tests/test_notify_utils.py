"""Tests for console notifications and local file helpers."""

import io
import os
import stat

from rich.console import Console
from rich.prompt import Prompt

from filelocker.notify import ConsoleNotifier
from filelocker.utils import (
    clear_read_only,
    file_extension,
    file_name,
    is_read_only,
    set_read_only,
)


def make_notifier():
    buffer = io.StringIO()
    console = Console(file=buffer, width=80, color_system=None)
    return ConsoleNotifier("File Locker", console=console, interactive=False), buffer


def test_status_line_is_prefixed_with_plugin_name():
    notifier, buffer = make_notifier()
    notifier.status('Locked "model.3dm"')
    assert buffer.getvalue() == 'File Locker: Locked "model.3dm"\n'


def test_alert_renders_title_and_body():
    notifier, buffer = make_notifier()
    notifier.alert("File is locked!", "Lock Owner:  alice")
    out = buffer.getvalue()
    assert "File is locked!" in out
    assert "Lock Owner:  alice" in out


def test_file_name_handles_both_separators():
    assert file_name("C:\\Docs\\model.3dm") == "model.3dm"
    assert file_name("/home/me/model.3dm") == "model.3dm"
    assert file_extension("C:\\Docs\\Model.3DM") == ".3dm"
    assert file_extension("C:\\Docs\\notes") == ""


def test_read_only_toggle(tmp_path):
    path = tmp_path / "model.3dm"
    path.write_bytes(b"")
    os.chmod(path, 0o664)

    set_read_only(str(path))
    assert is_read_only(str(path))
    assert not os.stat(path).st_mode & (stat.S_IWGRP | stat.S_IWOTH)

    clear_read_only(str(path))
    assert not is_read_only(str(path))


def test_alert_without_terminal_input_does_not_raise(monkeypatch):
    buffer = io.StringIO()
    notifier = ConsoleNotifier("File Locker", console=Console(file=buffer, width=80, color_system=None))

    def no_input(*args, **kwargs):
        raise EOFError

    monkeypatch.setattr(Prompt, "ask", no_input)
    notifier.alert("File is locked!", "Lock Owner:  alice")
    assert "Lock Owner:  alice" in buffer.getvalue()
