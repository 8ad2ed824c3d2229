"""
Configuration diff rendering.

Usage:
    from hangar.utils.diff import Diff

    diff = Diff(before=current_config, after=new_config)
    diff.render(sys.stdout, "my-pipeline")
"""

from .errors import SerializationError, WriteError
from .renderer import Diff, RenderedLine, render_snapshot, snapshot_lines
from .snapshot import snapshot_fields

__all__ = [
    "Diff",
    "RenderedLine",
    "render_snapshot",
    "snapshot_lines",
    "snapshot_fields",
    "SerializationError",
    "WriteError",
]
