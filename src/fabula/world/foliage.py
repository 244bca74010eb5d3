from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class FoliageDescriptor:
    """A foliage region (e.g. a patch of grass sprites) placed on a tile."""

    region_name: str


class FoliageSet:
    """Named catalog of foliage regions."""

    def __init__(self, name: str, regions: Iterable[str] = ()) -> None:
        self.name = name
        self._descriptors: Dict[str, FoliageDescriptor] = {}
        for region in regions:
            self.add(region)

    def add(self, region_name: str) -> FoliageDescriptor:
        if not region_name:
            raise ValueError("Foliage region name must be non-empty")
        descriptor = FoliageDescriptor(region_name)
        self._descriptors[region_name] = descriptor
        return descriptor

    def find_descriptor(self, region_name: str) -> Optional[FoliageDescriptor]:
        return self._descriptors.get(region_name)

    @property
    def region_names(self) -> List[str]:
        return list(self._descriptors)


@dataclass
class Foliage:
    """Wind animation tuning for a scene's foliage."""

    amplitude: float = 0.05
    speed: float = 1.0
