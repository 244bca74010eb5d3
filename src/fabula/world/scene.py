from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .foliage import Foliage
from .terrain import Terrain
from .water import Water

# Opaque white as signed 32-bit packed color bits.
DEFAULT_LIGHT_COLOR = -1


@dataclass
class Lights:
    ambient_color: int = DEFAULT_LIGHT_COLOR


@dataclass
class SunLight:
    color: int = DEFAULT_LIGHT_COLOR


class Scene:
    """A world model: terrain grid, lighting, water and foliage tuning."""

    def __init__(self, name: str, uid: str, columns: int, rows: int) -> None:
        self.name = name
        self.uid = uid
        self.terrain = Terrain(columns, rows)
        self.lights = Lights()
        self.sun_light = SunLight()
        self.water = Water()
        self.foliage = Foliage()
        self.final_shader = "default"
        self.skybox_name: Optional[str] = None

    @property
    def columns(self) -> int:
        return self.terrain.columns

    @property
    def rows(self) -> int:
        return self.terrain.rows

    def __repr__(self) -> str:
        return f"Scene(name={self.name!r}, uid={self.uid!r}, size={self.columns}x{self.rows})"
