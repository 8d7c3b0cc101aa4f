from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Core:
    owner: str


@dataclass(frozen=True)
class Neutral:
    pass


SupplyType = Union[Core, Neutral]


@dataclass(frozen=True)
class Normal:
    pass


@dataclass(frozen=True)
class SupplyCenter:
    supply: SupplyType


LandType = Union[Normal, SupplyCenter]


@dataclass(frozen=True)
class Sea:
    pass


@dataclass(frozen=True)
class Land:
    kind: LandType


Territory = Union[Sea, Land]


def normal_land() -> Land:
    return Land(Normal())


def supply_center(owner: str | None = None) -> Land:
    """Land supply center, Core-owned by ``owner`` or Neutral when owner is None."""
    supply: SupplyType = Core(owner) if owner is not None else Neutral()
    return Land(SupplyCenter(supply))


def is_sea(territory: Territory) -> bool:
    return isinstance(territory, Sea)


def is_land(territory: Territory) -> bool:
    return isinstance(territory, Land)


def is_supply_center(territory: Territory) -> bool:
    return isinstance(territory, Land) and isinstance(territory.kind, SupplyCenter)


def core_owner(territory: Territory) -> str | None:
    if not is_supply_center(territory):
        return None
    supply = territory.kind.supply
    if isinstance(supply, Core):
        return supply.owner
    return None


def describe(territory: Territory) -> str:
    if isinstance(territory, Sea):
        return "sea"
    if isinstance(territory.kind, Normal):
        return "land"
    owner = core_owner(territory)
    if owner is None:
        return "supply center (neutral)"
    return f"supply center ({owner})"
