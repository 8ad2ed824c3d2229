"""
Target resolution for commands that talk to the CI server.
"""

from typing import Optional
import typer
from hangar.utils.target_store import Target, TargetStore
from hangar.utils.console import console, error, info
from hangar.logging import get_logger


class TargetManager:
    """Resolves and validates the target a command runs against"""

    def __init__(self, target_store: TargetStore):
        self.target_store = target_store
        self.logger = get_logger("hangar.commands.target_manager")

    def load_target(self, target_name: Optional[str] = None) -> Target:
        """Load the named target, or the current one, and validate it"""
        name = target_name or self.target_store.get_current_target()

        if not name:
            error("No target selected!")
            console.print()
            info("📋 Save a target and select it:")
            info("   • hangar target save <name> --api-url <url>")
            info("   • hangar target use <name>")
            info("   or pass --target <name> to the command")
            console.print()
            raise typer.Exit(1)

        target = self.target_store.get_target(name)
        if target is None:
            error(f"Target '{name}' not found")
            info("List saved targets with 'hangar targets'")
            raise typer.Exit(1)

        try:
            target.validate()
        except ValueError as e:
            self.logger.warning(f"Target '{name}' failed validation: {e}")
            error(str(e))
            info(f"Run 'hangar target save {name} --api-url <url>' to log in again")
            raise typer.Exit(1)

        self.logger.debug(f"Using target '{name}' ({target.api_url}, team {target.team_name})")
        return target
