"""
Shared utilities for commands that talk to the CI server.
"""

from .target_manager import TargetManager
from .cli_options import CommonOptions

__all__ = ["TargetManager", "CommonOptions"]
