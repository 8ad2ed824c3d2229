"""
CI server API clients.
"""

from .client import ApiClient, ApiError
from .models import BasicAuth, GitHubAuth, GitHubTeam, Team, UAAAuth
from .pipelines import PipelineClient
from .teams import TeamClient

__all__ = [
    "ApiClient",
    "ApiError",
    "BasicAuth",
    "GitHubAuth",
    "GitHubTeam",
    "Team",
    "UAAAuth",
    "PipelineClient",
    "TeamClient",
]
