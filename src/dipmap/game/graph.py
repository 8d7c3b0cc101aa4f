from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from dipmap.config import GraphConfig

from .errors import InvalidHandleError, SelfLoopError
from .territory import Territory, core_owner, is_supply_center

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class NodeHandle:
    """Slot index plus the generation the slot had when the node was created.

    A handle goes stale once its node is removed: the slot's generation moves
    on, so the handle no longer matches even if the slot is reused.
    """

    index: int
    generation: int


@dataclass(frozen=True)
class Node:
    territory: Territory
    name: Optional[str]
    neighbors: Tuple[NodeHandle, ...]


@dataclass
class _Slot:
    generation: int
    territory: Optional[Territory] = None
    name: Optional[str] = None
    adjacency: List[NodeHandle] = field(default_factory=list)
    alive: bool = False


class TerritoryGraph:
    """Undirected territory adjacency graph.

    The graph owns every node. Adjacency lists hold handles, not nodes, and
    every lookup through a handle checks it is still live, so a removed node
    can never be reached through a neighbor entry.
    """

    def __init__(self, config: GraphConfig | None = None):
        self.config = config or GraphConfig()
        self._slots: List[_Slot] = []
        self._free: List[int] = []
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[NodeHandle]:
        return iter(self.handles())

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, NodeHandle) and self._lookup(handle) is not None

    @property
    def node_count(self) -> int:
        return self._count

    @property
    def edge_count(self) -> int:
        total = sum(len(self.neighbors(handle)) for handle in self.handles())
        return total // 2

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def create_node(self, territory: Territory, name: str | None = None) -> NodeHandle:
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
        else:
            index = len(self._slots)
            slot = _Slot(generation=0)
            self._slots.append(slot)
        slot.territory = territory
        slot.name = name
        slot.adjacency = []
        slot.alive = True
        self._count += 1

        handle = NodeHandle(index, slot.generation)
        logger.debug("node_created handle=%s name=%s", handle, name)
        return handle

    def remove_node(self, handle: NodeHandle) -> bool:
        """Remove a node and detach it from every neighbor.

        Removing a handle that is not live does nothing and returns False.
        """
        slot = self._lookup(handle)
        if slot is None:
            logger.debug("node_remove_ignored handle=%s", handle)
            return False

        slot.alive = False
        slot.generation += 1
        slot.territory = None
        slot.name = None
        slot.adjacency = []
        self._free.append(handle.index)
        self._count -= 1

        # back-references are not indexed by target, so every remaining list is scanned
        detached = 0
        for other in self._slots:
            if not other.alive:
                continue
            before = len(other.adjacency)
            other.adjacency = self._live_entries(other.adjacency, exclude=handle)
            detached += before - len(other.adjacency)

        logger.debug("node_removed handle=%s detached=%d", handle, detached)
        return True

    def add_edge(self, first: NodeHandle, second: NodeHandle) -> None:
        first_slot = self._require(first)
        second_slot = self._require(second)
        if first == second and not self.config.allow_self_loops:
            raise SelfLoopError(first)
        if not self.config.allow_duplicate_edges and second in first_slot.adjacency:
            logger.debug("edge_duplicate_ignored first=%s second=%s", first, second)
            return

        first_slot.adjacency.append(second)
        second_slot.adjacency.append(first)
        logger.debug("edge_added first=%s second=%s", first, second)

    def remove_edge(self, first: NodeHandle, second: NodeHandle) -> None:
        first_slot = self._require(first)
        second_slot = self._require(second)
        first_slot.adjacency = self._live_entries(first_slot.adjacency, exclude=second)
        second_slot.adjacency = self._live_entries(second_slot.adjacency, exclude=first)
        logger.debug("edge_removed first=%s second=%s", first, second)

    # ------------------------------------------------------------------
    # read access
    # ------------------------------------------------------------------

    def contains(self, handle: NodeHandle) -> bool:
        return self._lookup(handle) is not None

    def handles(self) -> List[NodeHandle]:
        return [
            NodeHandle(index, slot.generation)
            for index, slot in enumerate(self._slots)
            if slot.alive
        ]

    def nodes(self) -> List[Tuple[NodeHandle, Node]]:
        return [(handle, self.node(handle)) for handle in self.handles()]

    def node(self, handle: NodeHandle) -> Node:
        slot = self._require(handle)
        return Node(
            territory=slot.territory,
            name=slot.name,
            neighbors=tuple(self._live_entries(slot.adjacency)),
        )

    def territory(self, handle: NodeHandle) -> Territory:
        return self._require(handle).territory

    def name(self, handle: NodeHandle) -> str | None:
        return self._require(handle).name

    def neighbors(self, handle: NodeHandle) -> List[NodeHandle]:
        """Live neighbors of ``handle``; empty if the handle itself is stale."""
        slot = self._lookup(handle)
        if slot is None:
            return []
        return self._live_entries(slot.adjacency)

    def degree(self, handle: NodeHandle) -> int:
        return len(self.neighbors(handle))

    def are_adjacent(self, first: NodeHandle, second: NodeHandle) -> bool:
        return second in self.neighbors(first)

    def find(self, name: str) -> NodeHandle | None:
        for handle in self.handles():
            if self._slots[handle.index].name == name:
                return handle
        return None

    def supply_centers(self, owner: str | None = None) -> List[NodeHandle]:
        centers: List[NodeHandle] = []
        for handle in self.handles():
            territory = self._slots[handle.index].territory
            if not is_supply_center(territory):
                continue
            if owner is not None and core_owner(territory) != owner:
                continue
            centers.append(handle)
        return centers

    def adjacency_matrix(self) -> np.ndarray:
        """Square matrix over ``handles()`` order; entries count adjacency entries."""
        handles = self.handles()
        position: Dict[NodeHandle, int] = {handle: idx for idx, handle in enumerate(handles)}
        matrix = np.zeros((len(handles), len(handles)), dtype=np.int64)
        for handle in handles:
            for neighbor in self.neighbors(handle):
                matrix[position[handle], position[neighbor]] += 1
        return matrix

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _lookup(self, handle: NodeHandle) -> _Slot | None:
        if handle.index < 0 or handle.index >= len(self._slots):
            return None
        slot = self._slots[handle.index]
        if not slot.alive or slot.generation != handle.generation:
            return None
        return slot

    def _require(self, handle: NodeHandle) -> _Slot:
        slot = self._lookup(handle)
        if slot is None:
            raise InvalidHandleError(handle)
        return slot

    def _live_entries(
        self, adjacency: List[NodeHandle], exclude: NodeHandle | None = None
    ) -> List[NodeHandle]:
        return [
            neighbor
            for neighbor in adjacency
            if neighbor != exclude and self._lookup(neighbor) is not None
        ]
