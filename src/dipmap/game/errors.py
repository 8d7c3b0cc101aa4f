from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .graph import NodeHandle


class InvalidHandleError(LookupError):
    """Raised when a handle does not refer to a node currently in the graph."""

    def __init__(self, handle: "NodeHandle"):
        super().__init__(f"No live node for {handle}")
        self.handle = handle


class SelfLoopError(ValueError):
    def __init__(self, handle: "NodeHandle"):
        super().__init__(f"Refusing to connect {handle} to itself")
        self.handle = handle
