"""
Team payload models sent to the CI server.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class BasicAuth:
    username: str
    password: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "basic_auth_username": self.username,
            "basic_auth_password": self.password,
        }


@dataclass(frozen=True)
class GitHubTeam:
    organization_name: str
    team_name: str

    @classmethod
    def parse(cls, value: str) -> "GitHubTeam":
        """Parse an ``ORG/TEAM`` specification"""
        parts = value.split("/", 1)
        if len(parts) != 2:
            raise ValueError("malformed GitHub team specification")
        return cls(organization_name=parts[0], team_name=parts[1])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organization_name": self.organization_name,
            "team_name": self.team_name,
        }


@dataclass(frozen=True)
class GitHubAuth:
    client_id: str
    client_secret: str
    organizations: List[str] = field(default_factory=list)
    teams: List[GitHubTeam] = field(default_factory=list)
    users: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "organizations": list(self.organizations),
            "teams": [team.to_dict() for team in self.teams],
            "users": list(self.users),
        }


@dataclass(frozen=True)
class UAAAuth:
    """CF/UAA OAuth settings"""

    client_id: str
    client_secret: str
    cf_spaces: List[str]
    auth_url: str
    token_url: str
    cf_url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "cf_spaces": list(self.cf_spaces),
            "auth_url": self.auth_url,
            "token_url": self.token_url,
            "cf_url": self.cf_url,
        }


@dataclass(frozen=True)
class Team:
    name: str
    basic_auth: Optional[BasicAuth] = None
    github_auth: Optional[GitHubAuth] = None
    uaa_auth: Optional[UAAAuth] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON body for the team API; unconfigured providers are omitted"""
        payload: Dict[str, Any] = {"name": self.name}
        if self.basic_auth:
            payload["basic_auth"] = self.basic_auth.to_dict()
        if self.github_auth:
            payload["github_auth"] = self.github_auth.to_dict()
        if self.uaa_auth:
            payload["uaa_auth"] = self.uaa_auth.to_dict()
        return payload
