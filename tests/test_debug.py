"""Tests for debug logging."""

from cliselect.utils.config import Config
from cliselect.utils.debug import configure, debug, debug_menu, log_error


def test_debug_disabled_writes_nothing(temp_dir):
    log = temp_dir / "debug.log"
    configure(Config(debug_log=log))

    debug("menu", "hello")

    assert not log.exists()


def test_debug_enabled_writes_line(temp_dir):
    log = temp_dir / "debug.log"
    configure(Config(debug=True, debug_log=log))

    debug_menu("Moved", cursor=2)

    line = log.read_text().strip()
    assert line.startswith("[cliselect:menu] ")
    assert line.endswith("Moved | cursor=2")


def test_debug_never_prints(temp_dir, capsys):
    configure(Config(debug=True, debug_log=temp_dir / "debug.log"))

    debug("menu", "quiet")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_debug_without_log_path_is_silent(capsys):
    configure(Config(debug=True))

    debug("menu", "nowhere")

    assert capsys.readouterr().err == ""


def test_debug_unwritable_log_is_ignored(temp_dir):
    configure(Config(debug=True, debug_log=temp_dir / "missing" / "debug.log"))

    debug("menu", "lost")


def test_log_error_always_logs(temp_dir, capsys):
    log = temp_dir / "debug.log"
    configure(Config(debug_log=log))

    try:
        raise OSError("no tty")
    except OSError as e:
        log_error("tty", "Cannot read key", e)

    content = log.read_text()
    assert "[cliselect:tty]" in content
    assert "ERROR: Cannot read key" in content
    assert "OSError: no tty" in content
    assert "ERROR: Cannot read key" in capsys.readouterr().err
