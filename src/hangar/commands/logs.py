"""
Log management commands for the hangar CLI.

View recent log entries and change the log level.
"""

import json
import typer
from typing import Optional
from rich.syntax import Syntax
from hangar.logging import LogLevel, get_logger, get_log_file_path
from hangar.utils.target_store import TargetStore
from hangar.utils.console import console, error, info, success, warning
from hangar.constants import LOG_APP_NAME, LOG_LINES_TO_SHOW

app = typer.Typer(help="Manage hangar logs")
target_store = TargetStore()


def _read_settings() -> dict:
    if not target_store.settings_file.exists():
        return {}
    try:
        with open(target_store.settings_file, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, IOError):
        return {}


@app.command("show")
def show_logs(
    lines: int = typer.Option(
        LOG_LINES_TO_SHOW, "--lines", "-n", help="Number of lines to show"
    ),
    level: Optional[str] = typer.Option(
        None, "--level", help="Filter by log level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """Show recent log entries"""
    logger = get_logger("hangar.commands.logs")

    log_file = get_log_file_path()
    if not log_file.exists():
        warning(f"No log file found. Run some {LOG_APP_NAME} commands to generate logs.")
        return

    try:
        with open(log_file, "r", encoding="utf-8") as f:
            all_lines = f.readlines()
    except OSError as e:
        logger.error(f"Failed to read log file: {e}")
        error(f"Failed to read log file: {e}")
        raise typer.Exit(1)

    if level:
        all_lines = [line for line in all_lines if level.upper() in line]
    display_lines = all_lines[-lines:] if lines > 0 else []

    if not display_lines:
        info("No log entries found matching the criteria.")
        return

    console.print(Syntax("".join(display_lines), "log", theme="monokai", line_numbers=False))


@app.command("path")
def show_log_path() -> None:
    """Print the path of the log file"""
    console.print(str(get_log_file_path()), markup=False, highlight=False)


@app.command("set-level")
def set_log_level(
    level: str = typer.Argument(..., help="Log level (DEBUG, INFO, WARNING, ERROR)")
) -> None:
    """Set the logging level for hangar"""
    logger = get_logger("hangar.commands.logs")

    level_upper = level.upper()
    valid_levels = [lev.value for lev in LogLevel]
    if level_upper not in valid_levels:
        error(f"Invalid log level '{level}'. Valid levels: {', '.join(valid_levels)}")
        raise typer.Exit(1)

    settings = _read_settings()
    settings["log_level"] = level_upper

    try:
        with open(target_store.settings_file, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        logger.error(f"Failed to set log level: {e}")
        error(f"Failed to set log level: {e}")
        raise typer.Exit(1)

    success(f"Log level set to {level_upper}")
    info("The new log level will take effect on the next hangar command.")
    logger.info(f"Log level changed to {level_upper}")


@app.command("get-level")
def get_log_level() -> None:
    """Show the current logging level"""
    current_level = _read_settings().get("log_level", LogLevel.INFO.value)
    info(f"Current log level: {current_level}")
