"""
Pipeline configuration commands.

set-pipeline uploads a YAML pipeline configuration after showing a redacted
comparison with the configuration currently on the server. diff-config
renders the same comparison for two local files.
"""

import io
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional
import typer
import yaml
from rich.prompt import Confirm
from hangar.api import ApiError, PipelineClient
from hangar.commands.shared import CommonOptions, TargetManager
from hangar.utils.diff import Diff, SerializationError
from hangar.utils.redaction import DEFAULT_POLICY
from hangar.utils.target_store import TargetStore
from hangar.utils.console import error, info, print_diff, success
from hangar.logging import get_logger, log_transaction

target_store = TargetStore()


def timestamps_to_text(value: Any) -> Any:
    """Replace YAML timestamps with ISO strings so the config encodes as JSON"""
    if isinstance(value, dict):
        return {
            timestamps_to_text(key): timestamps_to_text(item) for key, item in value.items()
        }
    if isinstance(value, list):
        return [timestamps_to_text(item) for item in value]
    if isinstance(value, date):
        return value.isoformat()
    return value


def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Raises:
        ValueError: If the file is missing, unreadable or not a mapping
    """
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise ValueError(f"File not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {file_path}: {e}")
    except OSError as e:
        raise ValueError(f"Failed to read {file_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} must contain a mapping at the top level")
    try:
        return timestamps_to_text(data)
    except RecursionError:
        raise ValueError(f"{file_path} contains a self-referencing structure")


def render_diff(diff: Diff, label: str) -> str:
    """Render a diff into a string so nothing partial reaches the terminal"""
    buffer = io.StringIO()
    diff.render(buffer, label)
    return buffer.getvalue()


def set_pipeline(
    pipeline: str = typer.Option(..., "--pipeline", "-p", help="Pipeline to configure"),
    config: str = typer.Option(
        ..., "--config", "-c", help="Pipeline configuration file (YAML)"
    ),
    redact: Optional[List[str]] = CommonOptions.redact(),
    target: Optional[str] = CommonOptions.target(),
    non_interactive: bool = CommonOptions.non_interactive(),
):
    """Create or update a pipeline configuration"""
    logger = get_logger("hangar.commands.pipeline")

    active_target = TargetManager(target_store).load_target(target)

    try:
        new_config = load_config_file(config)
    except ValueError as e:
        error(str(e))
        raise typer.Exit(1)

    client = PipelineClient(active_target)
    try:
        existing_config, version = client.get_config(pipeline)
    except ApiError as e:
        logger.error(f"Failed to fetch pipeline '{pipeline}': {e}")
        error(f"Failed to fetch pipeline configuration: {e}")
        raise typer.Exit(1)

    diff = Diff(
        before=existing_config,
        after=new_config,
        policy=DEFAULT_POLICY.with_exact_names(redact or []),
    )
    try:
        rendered = render_diff(diff, pipeline)
    except SerializationError as e:
        error(f"Failed to render configuration diff: {e}")
        raise typer.Exit(1)

    if existing_config is not None and not diff.has_changes():
        info("no changes to apply")
        return

    print_diff(rendered)

    if not non_interactive and not Confirm.ask("apply configuration?"):
        error("bailing out")
        raise typer.Exit(1)

    log_transaction(f"set-pipeline {pipeline}", {"team": active_target.team_name, "version": version})

    try:
        created = client.save_config(pipeline, version, new_config)
    except ApiError as e:
        logger.error(f"Failed to save pipeline '{pipeline}': {e}")
        error(f"Failed to save pipeline configuration: {e}")
        raise typer.Exit(1)

    logger.info(f"Pipeline '{pipeline}' {'created' if created else 'updated'}")
    success("pipeline created!" if created else "configuration updated")


def diff_config(
    before: str = typer.Argument(..., help="Current configuration file (YAML)"),
    after: str = typer.Argument(..., help="New configuration file (YAML)"),
    label: Optional[str] = typer.Option(
        None, "--label", "-l", help="Header for the comparison (defaults to the new file name)"
    ),
    redact: Optional[List[str]] = CommonOptions.redact(),
):
    """Show a redacted diff of two configuration files"""
    try:
        before_config = load_config_file(before)
        after_config = load_config_file(after)
    except ValueError as e:
        error(str(e))
        raise typer.Exit(1)

    diff = Diff(
        before=before_config,
        after=after_config,
        policy=DEFAULT_POLICY.with_exact_names(redact or []),
    )
    try:
        rendered = render_diff(diff, label or Path(after).name)
    except SerializationError as e:
        error(f"Failed to render configuration diff: {e}")
        raise typer.Exit(1)

    print_diff(rendered)
    if not diff.has_changes():
        info("no changes")
