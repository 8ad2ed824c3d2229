"""
Team management.

- flags: set-team flag groups and their validation
- set_team: the set-team command
"""

from .flags import SetTeamFlags, BasicAuthFlags, GitHubAuthFlags, CFAuthFlags

__all__ = [
    "SetTeamFlags",
    "BasicAuthFlags",
    "GitHubAuthFlags",
    "CFAuthFlags",
]
