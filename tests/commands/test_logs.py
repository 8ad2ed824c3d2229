import json

import pytest
import typer

from hangar.commands.logs import get_log_level, set_log_level, show_log_path, show_logs

MODULE = "hangar.commands.logs"


@pytest.fixture
def settings_file(mocker, tmp_path):
    store = mocker.Mock()
    store.settings_file = tmp_path / "settings.json"
    mocker.patch(f"{MODULE}.target_store", store)
    return store.settings_file


def test_set_log_level(mocker, settings_file):
    mocker.patch(f"{MODULE}.success")
    mocker.patch(f"{MODULE}.info")

    set_log_level("debug")

    assert json.loads(settings_file.read_text()) == {"log_level": "DEBUG"}


def test_set_log_level_keeps_other_settings(mocker, settings_file):
    settings_file.write_text(json.dumps({"other": 1}))
    mocker.patch(f"{MODULE}.success")
    mocker.patch(f"{MODULE}.info")

    set_log_level("ERROR")

    assert json.loads(settings_file.read_text()) == {"other": 1, "log_level": "ERROR"}


def test_set_log_level_invalid(mocker, settings_file):
    mock_error = mocker.patch(f"{MODULE}.error")

    with pytest.raises(typer.Exit) as exc_info:
        set_log_level("LOUD")

    assert exc_info.value.exit_code == 1
    assert "Invalid log level 'LOUD'" in mock_error.call_args.args[0]
    assert not settings_file.exists()


def test_get_log_level_default(mocker, settings_file):
    mock_info = mocker.patch(f"{MODULE}.info")

    get_log_level()

    mock_info.assert_called_once_with("Current log level: INFO")


def test_get_log_level_configured(mocker, settings_file):
    settings_file.write_text(json.dumps({"log_level": "WARNING"}))
    mock_info = mocker.patch(f"{MODULE}.info")

    get_log_level()

    mock_info.assert_called_once_with("Current log level: WARNING")


def test_show_logs_without_file(mocker, tmp_path):
    mocker.patch(f"{MODULE}.get_log_file_path", return_value=tmp_path / "hangar.log")
    mock_warning = mocker.patch(f"{MODULE}.warning")

    show_logs(lines=20, level=None)

    mock_warning.assert_called_once()


def test_show_logs_filters_by_level(mocker, tmp_path):
    log_file = tmp_path / "hangar.log"
    log_file.write_text(
        "2026-01-01 INFO [hangar] started\n"
        "2026-01-01 ERROR [hangar] broke\n"
        "2026-01-01 INFO [hangar] finished\n"
    )
    mocker.patch(f"{MODULE}.get_log_file_path", return_value=log_file)
    mock_print = mocker.patch(f"{MODULE}.console.print")

    show_logs(lines=20, level="error")

    syntax = mock_print.call_args.args[0]
    assert syntax.code == "2026-01-01 ERROR [hangar] broke\n"


def test_show_logs_no_matches(mocker, tmp_path):
    log_file = tmp_path / "hangar.log"
    log_file.write_text("2026-01-01 INFO [hangar] started\n")
    mocker.patch(f"{MODULE}.get_log_file_path", return_value=log_file)
    mock_info = mocker.patch(f"{MODULE}.info")

    show_logs(lines=20, level="DEBUG")

    mock_info.assert_called_once_with("No log entries found matching the criteria.")


def test_show_log_path(mocker, tmp_path):
    mocker.patch(f"{MODULE}.get_log_file_path", return_value=tmp_path / "hangar.log")
    mock_print = mocker.patch(f"{MODULE}.console.print")

    show_log_path()

    assert mock_print.call_args.args[0] == str(tmp_path / "hangar.log")
