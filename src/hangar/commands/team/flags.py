"""
Flag groups of the set-team command and their validation.

Each group counts as configured as soon as any of its flags is set, and a
configured group must then be complete.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from hangar.api.models import BasicAuth, GitHubAuth, GitHubTeam, Team, UAAAuth


@dataclass
class BasicAuthFlags:
    username: str = ""
    password: str = ""

    def is_configured(self) -> bool:
        return bool(self.username or self.password)

    def validate(self) -> None:
        if not self.username or not self.password:
            raise ValueError("Both username and password are required for basic auth.")

    def to_model(self) -> BasicAuth:
        return BasicAuth(username=self.username, password=self.password)


@dataclass
class GitHubAuthFlags:
    client_id: str = ""
    client_secret: str = ""
    organizations: List[str] = field(default_factory=list)
    teams: List[GitHubTeam] = field(default_factory=list)
    users: List[str] = field(default_factory=list)

    def is_configured(self) -> bool:
        return bool(
            self.client_id
            or self.client_secret
            or self.organizations
            or self.teams
            or self.users
        )

    def validate(self) -> None:
        if not self.client_id or not self.client_secret:
            raise ValueError("Both client-id and client-secret are required for github-auth.")
        if not self.organizations and not self.teams and not self.users:
            raise ValueError(
                "At least one of the following is required for github-auth: "
                "organizations, teams, users"
            )

    def to_model(self) -> GitHubAuth:
        return GitHubAuth(
            client_id=self.client_id,
            client_secret=self.client_secret,
            organizations=list(self.organizations),
            teams=list(self.teams),
            users=list(self.users),
        )


@dataclass
class CFAuthFlags:
    client_id: str = ""
    client_secret: str = ""
    spaces: List[str] = field(default_factory=list)
    auth_url: str = ""
    token_url: str = ""
    api_url: str = ""

    def is_configured(self) -> bool:
        return bool(
            self.client_id
            or self.client_secret
            or self.spaces
            or self.auth_url
            or self.token_url
            or self.api_url
        )

    def validate(self) -> None:
        if not self.client_id or not self.client_secret:
            raise ValueError("Both client-id and client-secret are required for cf-auth.")
        if not self.spaces:
            raise ValueError("space is required for cf-auth.")
        if not self.auth_url or not self.token_url or not self.api_url:
            raise ValueError("auth-url, token-url and api-url are required for cf-auth.")

    def to_model(self) -> UAAAuth:
        return UAAAuth(
            client_id=self.client_id,
            client_secret=self.client_secret,
            cf_spaces=list(self.spaces),
            auth_url=self.auth_url,
            token_url=self.token_url,
            cf_url=self.api_url,
        )


@dataclass
class SetTeamFlags:
    team_name: str
    basic_auth: BasicAuthFlags = field(default_factory=BasicAuthFlags)
    github_auth: GitHubAuthFlags = field(default_factory=GitHubAuthFlags)
    cf_auth: CFAuthFlags = field(default_factory=CFAuthFlags)

    def validate_flags(self) -> Tuple[bool, bool, bool]:
        """
        Validate all flag groups.

        Returns:
            Tuple of (has_basic_auth, has_github_auth, has_cf_auth)

        Raises:
            ValueError: If a configured group is incomplete
        """
        has_basic_auth = self.basic_auth.is_configured()
        if has_basic_auth:
            self.basic_auth.validate()

        has_github_auth = self.github_auth.is_configured()
        if has_github_auth:
            self.github_auth.validate()

        has_cf_auth = self.cf_auth.is_configured()
        if has_cf_auth:
            self.cf_auth.validate()

        return has_basic_auth, has_github_auth, has_cf_auth

    def build_team(self) -> Team:
        """Build the team payload; call validate_flags() first"""
        return Team(
            name=self.team_name,
            basic_auth=self.basic_auth.to_model() if self.basic_auth.is_configured() else None,
            github_auth=self.github_auth.to_model() if self.github_auth.is_configured() else None,
            uaa_auth=self.cf_auth.to_model() if self.cf_auth.is_configured() else None,
        )
