from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional


class AutoTileType(Enum):
    """Orientation/edge variants of an auto-tile family.

    The value is the ordinal written into terrain data, so members must never
    be reordered or removed.
    """

    INNER_REPEATING = 0
    CORNER_TOP_LEFT = 1
    CORNER_TOP_RIGHT = 2
    CORNER_BOTTOM_LEFT = 3
    CORNER_BOTTOM_RIGHT = 4
    EDGE_TOP = 5
    EDGE_BOTTOM = 6
    EDGE_LEFT = 7
    EDGE_RIGHT = 8
    INNER_CORNER_TOP_LEFT = 9
    INNER_CORNER_TOP_RIGHT = 10
    INNER_CORNER_BOTTOM_LEFT = 11
    INNER_CORNER_BOTTOM_RIGHT = 12
    PAD = 13

    @property
    def ordinal(self) -> int:
        return self.value

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Optional["AutoTileType"]:
        try:
            return cls(ordinal)
        except ValueError:
            return None


@dataclass(frozen=True)
class AutoTile:
    """One concrete variant of an auto-tile family."""

    family: str
    type: AutoTileType


class AutoTiles:
    """A named family of auto-tile variants, one per AutoTileType."""

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Auto-tile family name must be non-empty")
        self.name = name
        self._variants: Dict[AutoTileType, AutoTile] = {
            t: AutoTile(family=name, type=t) for t in AutoTileType
        }

    def get_auto_tile(self, type_: AutoTileType) -> AutoTile:
        return self._variants[type_]

    def __iter__(self) -> Iterator[AutoTile]:
        return iter(self._variants.values())

    def __repr__(self) -> str:
        return f"AutoTiles({self.name!r})"
