from .config import GraphConfig
from .game import (
    InvalidHandleError,
    NodeHandle,
    SelfLoopError,
    TerritoryGraph,
    build_turkey,
    build_turkey_region,
)

__all__ = [
    "GraphConfig",
    "InvalidHandleError",
    "NodeHandle",
    "SelfLoopError",
    "TerritoryGraph",
    "build_turkey",
    "build_turkey_region",
]
