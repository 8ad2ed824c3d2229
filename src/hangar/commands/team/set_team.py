"""
The set-team command.

Collects authentication settings for a team, validates the flag
combination, asks for confirmation and saves the team on the server.
"""

from typing import List, Optional
import typer
from rich.prompt import Confirm
from hangar.api import ApiError, GitHubTeam, TeamClient
from hangar.commands.shared import CommonOptions, TargetManager
from hangar.utils.target_store import TargetStore
from hangar.utils.console import console, success, error
from hangar.logging import get_logger, log_transaction
from .flags import BasicAuthFlags, CFAuthFlags, GitHubAuthFlags, SetTeamFlags

target_store = TargetStore()


def auth_method_status_description(enabled: bool) -> str:
    return "enabled" if enabled else "disabled"


def set_team(
    team_name: str = typer.Option(
        ..., "--team-name", "-n", help="The team to create or modify"
    ),
    basic_auth_username: Optional[str] = typer.Option(
        None, "--basic-auth-username", help="Username to use for basic auth."
    ),
    basic_auth_password: Optional[str] = typer.Option(
        None, "--basic-auth-password", help="Password to use for basic auth."
    ),
    github_auth_client_id: Optional[str] = typer.Option(
        None, "--github-auth-client-id", help="Application client ID for enabling GitHub OAuth."
    ),
    github_auth_client_secret: Optional[str] = typer.Option(
        None,
        "--github-auth-client-secret",
        help="Application client secret for enabling GitHub OAuth.",
    ),
    github_auth_organization: Optional[List[str]] = typer.Option(
        None,
        "--github-auth-organization",
        help="GitHub organization whose members will have access.",
        metavar="ORG",
    ),
    github_auth_team: Optional[List[str]] = typer.Option(
        None,
        "--github-auth-team",
        help="GitHub team whose members will have access.",
        metavar="ORG/TEAM",
    ),
    github_auth_user: Optional[List[str]] = typer.Option(
        None, "--github-auth-user", help="GitHub user to permit access.", metavar="LOGIN"
    ),
    cf_auth_client_id: Optional[str] = typer.Option(
        None, "--cf-auth-client-id", help="Application client ID for enabling UAA OAuth."
    ),
    cf_auth_client_secret: Optional[str] = typer.Option(
        None,
        "--cf-auth-client-secret",
        help="Application client secret for enabling UAA OAuth.",
    ),
    cf_auth_space: Optional[List[str]] = typer.Option(
        None,
        "--cf-auth-space",
        help="Space GUID for a CF space whose developers will have access.",
    ),
    cf_auth_auth_url: Optional[str] = typer.Option(
        None, "--cf-auth-auth-url", help="UAA AuthURL endpoint."
    ),
    cf_auth_token_url: Optional[str] = typer.Option(
        None, "--cf-auth-token-url", help="UAA TokenURL endpoint."
    ),
    cf_auth_api_url: Optional[str] = typer.Option(
        None, "--cf-auth-api-url", help="CF API endpoint."
    ),
    target: Optional[str] = CommonOptions.target(),
    non_interactive: bool = CommonOptions.non_interactive(),
):
    """Create or modify a team's authentication settings"""
    logger = get_logger("hangar.commands.team")

    active_target = TargetManager(target_store).load_target(target)

    try:
        flags = SetTeamFlags(
            team_name=team_name,
            basic_auth=BasicAuthFlags(
                username=basic_auth_username or "",
                password=basic_auth_password or "",
            ),
            github_auth=GitHubAuthFlags(
                client_id=github_auth_client_id or "",
                client_secret=github_auth_client_secret or "",
                organizations=list(github_auth_organization or []),
                teams=[GitHubTeam.parse(value) for value in github_auth_team or []],
                users=list(github_auth_user or []),
            ),
            cf_auth=CFAuthFlags(
                client_id=cf_auth_client_id or "",
                client_secret=cf_auth_client_secret or "",
                spaces=list(cf_auth_space or []),
                auth_url=cf_auth_auth_url or "",
                token_url=cf_auth_token_url or "",
                api_url=cf_auth_api_url or "",
            ),
        )
        has_basic_auth, has_github_auth, has_cf_auth = flags.validate_flags()
    except ValueError as e:
        logger.warning(f"Invalid set-team flags: {e}")
        error(str(e))
        raise typer.Exit(1)

    console.print(f"Team Name: {team_name}", markup=False, highlight=False)
    console.print(f"Basic Auth: {auth_method_status_description(has_basic_auth)}")
    console.print(f"GitHub Auth: {auth_method_status_description(has_github_auth)}")
    console.print(f"CF Auth: {auth_method_status_description(has_cf_auth)}")

    if not non_interactive and not Confirm.ask("apply configuration?"):
        error("bailing out")
        raise typer.Exit(1)

    team = flags.build_team()
    log_transaction(f"set-team {team_name}", team.to_dict())

    try:
        _, created, _ = TeamClient(active_target).create_or_update(team_name, team)
    except ApiError as e:
        logger.error(f"Failed to save team '{team_name}': {e}")
        error(f"Failed to save team: {e}")
        raise typer.Exit(1)

    logger.info(f"Team '{team_name}' {'created' if created else 'updated'}")
    success("team created" if created else "team updated")
