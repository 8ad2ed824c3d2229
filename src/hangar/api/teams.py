"""
Team API.
"""

from typing import Any, Dict, Tuple

from hangar.constants import TEAM_PATH
from hangar.utils.url import path_segment
from .client import ApiClient
from .models import Team


class TeamClient(ApiClient):
    """Team management endpoints"""

    def create_or_update(self, team_name: str, team: Team) -> Tuple[Dict[str, Any], bool, bool]:
        """
        Create the team or replace its authentication settings.

        Returns:
            Tuple of (saved team, created, updated)
        """
        path = TEAM_PATH.format(team=path_segment(team_name))
        self.logger.info(f"Saving team '{team_name}'")

        response = self.make_http_request(path, method="PUT", json_body=team.to_dict())

        saved = response.json() if response.content else {}
        created = response.status_code == 201
        updated = response.status_code == 200
        return saved, created, updated
