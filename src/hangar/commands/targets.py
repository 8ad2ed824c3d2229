import typer
from typing import Optional
from rich.prompt import Prompt
from hangar.constants import DEFAULT_TEAM
from hangar.utils.target_store import Target, TargetStore
from hangar.utils.console import console, success, error, info, create_table
from hangar.utils.url import normalize_api_url
from hangar.logging import get_logger

app = typer.Typer(help="Manage targets")
target_store = TargetStore()


@app.command("save")
def save_target(
    name: str = typer.Argument(..., help="Target name"),
    api_url: str = typer.Option(..., "--api-url", "-c", help="CI server API URL"),
    team_name: str = typer.Option(DEFAULT_TEAM, "--team-name", "-n", help="Team to act as"),
    token: Optional[str] = typer.Option(
        None, "--token", help="Bearer token (prompted when omitted)"
    ),
    insecure: bool = typer.Option(
        False, "--insecure", "-k", help="Skip TLS certificate verification"
    ),
):
    """Save a target and its token"""
    logger = get_logger("hangar.commands.targets")

    api_url_value = normalize_api_url(api_url)
    if not api_url_value:
        error("--api-url must not be empty")
        raise typer.Exit(1)

    token_value = token or Prompt.ask("Bearer token", password=True)
    if not token_value:
        error("A token is required to save a target")
        raise typer.Exit(1)

    target = Target(
        name=name,
        api_url=api_url_value,
        team_name=team_name,
        insecure=insecure,
        token=token_value,
    )
    target_store.save_target(target)
    logger.info(f"Saved target '{name}' ({api_url_value}, team {team_name})")

    if not target_store.get_current_target():
        target_store.set_current_target(name)

    success(f"Target '{name}' saved")
    info(f"   Use it with: hangar target use {name}")


@app.command("use")
def use_target(name: str = typer.Argument(..., help="Target name to switch to")):
    """Switch to a target"""
    targets = target_store.get_targets()

    if name not in targets:
        error(f"Target '{name}' not found")
        raise typer.Exit(1)

    target_store.set_current_target(name)
    success(f"Switched to target '{name}'")


def list_targets():
    """List all targets"""
    targets = target_store.get_targets()
    current_target = target_store.get_current_target()

    if not targets:
        info("No targets found. Save one with 'hangar target save <name> --api-url <url>'")
        return

    table = create_table("Targets", ["Name", "URL", "Team", "Status", "Updated"])

    for name, target in targets.items():
        status = "🟢 Active" if name == current_target else "⚪ Inactive"
        updated = target.get("updated_at", "Unknown")[:10]
        table.add_row(name, target.get("api_url", ""), target.get("team_name", ""), status, updated)

    console.print(table)


@app.command("delete")
def delete_target(name: str = typer.Argument(..., help="Target name to delete")):
    """Delete a target and its stored token"""
    targets = target_store.get_targets()

    if name not in targets:
        error(f"Target '{name}' not found")
        raise typer.Exit(1)

    target_store.delete_target(name)
    success(f"Target '{name}' deleted successfully")
