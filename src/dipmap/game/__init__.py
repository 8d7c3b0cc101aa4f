from .errors import InvalidHandleError, SelfLoopError
from .graph import Node, NodeHandle, TerritoryGraph
from .map import build_graph, build_turkey, build_turkey_region
from .territory import Core, Land, Neutral, Normal, Sea, SupplyCenter, Territory

__all__ = [
    "InvalidHandleError",
    "SelfLoopError",
    "Node",
    "NodeHandle",
    "TerritoryGraph",
    "build_graph",
    "build_turkey",
    "build_turkey_region",
    "Core",
    "Land",
    "Neutral",
    "Normal",
    "Sea",
    "SupplyCenter",
    "Territory",
]
