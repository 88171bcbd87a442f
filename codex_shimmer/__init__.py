"""
Shimmering single-line text panel fed by a JSON cache file
"""
from codex_shimmer.module import (
    ShimmerModule,
    initialize,
    invoke_action,
    notify_redraw,
    refresh,
    teardown,
)

__all__ = [
    "ShimmerModule",
    "initialize",
    "invoke_action",
    "notify_redraw",
    "refresh",
    "teardown",
]
