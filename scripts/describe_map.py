from __future__ import annotations

import argparse
import logging
from typing import List, Sequence

from dipmap.config import setup_logging
from dipmap.game.graph import TerritoryGraph
from dipmap.game.map import MAPS, build_graph
from dipmap.game.territory import describe

logger = logging.getLogger(__name__)


def render(graph: TerritoryGraph) -> List[str]:
    lines: List[str] = []
    for handle, node in graph.nodes():
        neighbor_names = sorted(graph.name(neighbor) or "?" for neighbor in node.neighbors)
        lines.append(
            f"{node.name or '?'} [{describe(node.territory)}]: {', '.join(neighbor_names)}"
        )
    lines.append(f"{graph.node_count} territories, {graph.edge_count} borders")
    return lines


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print a sample territory map.")
    parser.add_argument("--map", choices=sorted(MAPS), default="region")
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        help="Territory name to remove before printing (repeatable).",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    setup_logging(args.log_level.upper())

    territories, edges = MAPS[args.map]
    graph, handles = build_graph(territories, edges)
    for name in args.remove:
        handle = handles.get(name)
        if handle is None:
            parser.error(f"Unknown territory {name!r}")
        graph.remove_node(handle)
        logger.info("removed %s", name)

    for line in render(graph):
        print(line)


if __name__ == "__main__":
    main()
