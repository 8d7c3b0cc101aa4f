import pytest

from dipmap.game.map import (
    REGION_EDGES,
    REGION_TERRITORIES,
    build_graph,
    build_turkey,
    build_turkey_region,
)
from dipmap.game.territory import Sea, normal_land, supply_center


def _names(graph, handles):
    return {graph.name(handle) for handle in handles}


def test_turkey_nodes():
    graph = build_turkey()

    assert graph.node_count == 3
    assert _names(graph, graph.handles()) == {"Constantinople", "Ankara", "Smyrna"}
    for handle in graph.handles():
        assert graph.degree(handle) == 2
        assert graph.territory(handle) == supply_center("Turkey")
    assert graph.edge_count == 3


def test_turkey_without_ankara():
    graph = build_turkey()
    ankara = graph.find("Ankara")

    graph.remove_node(ankara)

    assert graph.node_count == 2
    con = graph.find("Constantinople")
    smy = graph.find("Smyrna")
    assert graph.neighbors(con) == [smy]
    assert graph.neighbors(smy) == [con]
    assert graph.find("Ankara") is None


def test_region_counts():
    graph = build_turkey_region()

    assert graph.node_count == 8
    assert graph.edge_count == 13


def test_region_black_sea_neighbors():
    graph = build_turkey_region()
    black_sea = graph.find("Black Sea")

    assert _names(graph, graph.neighbors(black_sea)) == {
        "Constantinople",
        "Ankara",
        "Sevastopol",
        "Armenia",
    }


def test_region_classifications():
    graph = build_turkey_region()

    assert graph.territory(graph.find("Eastern Mediterranean")) == Sea()
    assert graph.territory(graph.find("Syria")) == normal_land()
    assert graph.territory(graph.find("Sevastopol")) == supply_center("Russia")


def test_build_graph_returns_name_index():
    graph, handles = build_graph(REGION_TERRITORIES, REGION_EDGES)

    assert set(handles) == {name for name, _ in REGION_TERRITORIES}
    for name, handle in handles.items():
        assert graph.name(handle) == name


def test_build_graph_rejects_unknown_territory():
    with pytest.raises(KeyError, match="Atlantis"):
        build_graph([("Syria", normal_land())], [("Syria", "Atlantis")])
