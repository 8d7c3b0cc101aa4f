from typing import Dict

import pytest

from dipmap.game.graph import NodeHandle, TerritoryGraph
from dipmap.game.map import (
    REGION_EDGES,
    REGION_TERRITORIES,
    TURKEY_EDGES,
    TURKEY_TERRITORIES,
    build_graph,
)


@pytest.fixture
def turkey() -> tuple[TerritoryGraph, Dict[str, NodeHandle]]:
    return build_graph(TURKEY_TERRITORIES, TURKEY_EDGES)


@pytest.fixture
def region() -> tuple[TerritoryGraph, Dict[str, NodeHandle]]:
    return build_graph(REGION_TERRITORIES, REGION_EDGES)
