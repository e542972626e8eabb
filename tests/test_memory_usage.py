import sys
from unittest import mock

from meshcore import memory_usage


def test_max_size_non_negative():
    assert memory_usage.max_size() >= 0


def test_current_size_non_negative():
    assert memory_usage.current_size() >= 0


def test_unsupported_platform_gives_zero():
    with mock.patch.object(sys, "platform", "win32"):
        assert memory_usage.max_size() == 0
        assert memory_usage.current_size() == 0


def test_current_size_parses_statm():
    with mock.patch.object(sys, "platform", "linux"), mock.patch(
        "builtins.open", mock.mock_open(read_data="100 25 3 1 0 20 0\n")
    ), mock.patch("os.sysconf", return_value=1, create=True):
        assert memory_usage.current_size() == 25


def test_current_size_unreadable_file(capsys):
    with mock.patch.object(sys, "platform", "linux"), mock.patch(
        "builtins.open", side_effect=OSError("nope")
    ):
        assert memory_usage.current_size() == 0
    assert "Failed to read process information file" in capsys.readouterr().err


def test_current_size_malformed_file(capsys):
    with mock.patch.object(sys, "platform", "linux"), mock.patch(
        "builtins.open", mock.mock_open(read_data="100")
    ):
        assert memory_usage.current_size() == 0
    assert "Failed to retrieve RSS information" in capsys.readouterr().err