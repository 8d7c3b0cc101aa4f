from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple

from dipmap.config import GraphConfig

from .graph import NodeHandle, TerritoryGraph
from .territory import Sea, Territory, normal_land, supply_center


TURKEY_TERRITORIES: Sequence[Tuple[str, Territory]] = (
    ("Constantinople", supply_center("Turkey")),
    ("Smyrna", supply_center("Turkey")),
    ("Ankara", supply_center("Turkey")),
)

TURKEY_EDGES: Sequence[Tuple[str, str]] = (
    ("Constantinople", "Ankara"),
    ("Constantinople", "Smyrna"),
    ("Ankara", "Smyrna"),
)

REGION_TERRITORIES: Sequence[Tuple[str, Territory]] = (
    *TURKEY_TERRITORIES,
    ("Sevastopol", supply_center("Russia")),
    ("Black Sea", Sea()),
    ("Eastern Mediterranean", Sea()),
    ("Armenia", normal_land()),
    ("Syria", normal_land()),
)

REGION_EDGES: Sequence[Tuple[str, str]] = (
    ("Constantinople", "Ankara"),
    ("Constantinople", "Smyrna"),
    ("Constantinople", "Black Sea"),
    ("Ankara", "Black Sea"),
    ("Ankara", "Smyrna"),
    ("Ankara", "Armenia"),
    ("Smyrna", "Eastern Mediterranean"),
    ("Smyrna", "Syria"),
    ("Sevastopol", "Black Sea"),
    ("Sevastopol", "Armenia"),
    ("Eastern Mediterranean", "Syria"),
    ("Black Sea", "Armenia"),
    ("Armenia", "Syria"),
)

MAPS = {
    "turkey": (TURKEY_TERRITORIES, TURKEY_EDGES),
    "region": (REGION_TERRITORIES, REGION_EDGES),
}


def build_graph(
    territories: Iterable[Tuple[str, Territory]],
    edges: Iterable[Tuple[str, str]],
    config: GraphConfig | None = None,
) -> Tuple[TerritoryGraph, Dict[str, NodeHandle]]:
    graph = TerritoryGraph(config)
    handles: Dict[str, NodeHandle] = {}
    for name, territory in territories:
        handles[name] = graph.create_node(territory, name)
    for first, second in edges:
        for name in (first, second):
            if name not in handles:
                raise KeyError(f"Edge references unknown territory {name!r}")
        graph.add_edge(handles[first], handles[second])
    return graph, handles


def build_turkey(config: GraphConfig | None = None) -> TerritoryGraph:
    graph, _ = build_graph(TURKEY_TERRITORIES, TURKEY_EDGES, config)
    return graph


def build_turkey_region(config: GraphConfig | None = None) -> TerritoryGraph:
    graph, _ = build_graph(REGION_TERRITORIES, REGION_EDGES, config)
    return graph
