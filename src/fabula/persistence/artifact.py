from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional

from ..world import Foliage, Scene, Water
from .errors import PreconditionViolationError

# Increment on any change to the document fields or the tile record layout.
FORMAT_VERSION = 3


class ArtifactPhase(Enum):
    NEW = auto()
    PREPARED = auto()
    COMPLETED = auto()
    LOADED = auto()
    SKIPPED = auto()
    RELEASED = auto()


@dataclass
class WaterData:
    alpha: float = 0.0
    mix: float = 0.0
    amplitude: float = 0.0
    animation_speed: float = 0.0
    speed: float = 0.0
    material: str = ""

    @staticmethod
    def from_water(water: Water) -> "WaterData":
        return WaterData(
            alpha=water.alpha,
            mix=water.mix,
            amplitude=water.amplitude_wave,
            animation_speed=water.water_animation_speed,
            speed=water.angle_wave_speed,
            material=water.water_material,
        )

    def apply_to(self, water: Water) -> None:
        water.alpha = self.alpha
        water.mix = self.mix
        water.amplitude_wave = self.amplitude
        water.water_animation_speed = self.animation_speed
        water.angle_wave_speed = self.speed
        water.water_material = self.material

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alpha": self.alpha,
            "mix": self.mix,
            "amplitude": self.amplitude,
            "animationSpeed": self.animation_speed,
            "speed": self.speed,
            "material": self.material,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "WaterData":
        return WaterData(
            alpha=float(data["alpha"]),
            mix=float(data["mix"]),
            amplitude=float(data["amplitude"]),
            animation_speed=float(data["animationSpeed"]),
            speed=float(data["speed"]),
            material=str(data["material"]),
        )


@dataclass
class FoliageData:
    amplitude: float = 0.0
    speed: float = 0.0

    @staticmethod
    def from_foliage(foliage: Foliage) -> "FoliageData":
        return FoliageData(amplitude=foliage.amplitude, speed=foliage.speed)

    def apply_to(self, foliage: Foliage) -> None:
        foliage.amplitude = self.amplitude
        foliage.speed = self.speed

    def to_dict(self) -> Dict[str, Any]:
        return {"amplitude": self.amplitude, "speed": self.speed}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "FoliageData":
        return FoliageData(amplitude=float(data["amplitude"]), speed=float(data["speed"]))


@dataclass
class SceneArtifact:
    """Persisted form of one scene.

    One instance serves a single save or a single load. Which fields hold
    meaningful values depends on the phase:

    - ``from_scene``: scalars and ``scene``; no blob or sub-records yet.
    - after ``prepare``: everything, including ``terrain_data`` and sizes.
    - read from a document: scalars, sub-records and ``terrain_data``.
    - after ``commit``: ``scene`` is the loaded scene; ``terrain_data`` is None.
    - after ``complete`` or ``release``: ``terrain_data`` is None.

    ``skip_terrain``, the sizes, ``scene`` and ``phase`` are never written to
    the document.
    """

    name: str = ""
    uid: str = ""
    final_shader: str = ""
    ambient_color: int = 0
    sun_light_color: int = 0
    columns: int = 0
    rows: int = 0
    tileset_name: str = ""
    foliage_name: str = ""
    terrain_data: Optional[str] = None
    version: int = 0
    skybox: Optional[str] = None
    water_data: Optional[WaterData] = None
    foliage_data: Optional[FoliageData] = None

    skip_terrain: bool = field(default=False, compare=False)
    uncompressed_size: int = field(default=0, compare=False)
    compressed_size: int = field(default=0, compare=False)
    scene: Optional[Scene] = field(default=None, compare=False, repr=False)
    phase: ArtifactPhase = field(default=ArtifactPhase.NEW, compare=False)

    @staticmethod
    def from_scene(scene: Scene) -> "SceneArtifact":
        terrain = scene.terrain
        if terrain.tileset is None or terrain.foliage_set is None:
            raise PreconditionViolationError(f"Scene '{scene.uid}' terrain has no tileset or foliage set bound")
        return SceneArtifact(
            version=FORMAT_VERSION,
            name=scene.name,
            uid=scene.uid,
            skybox=scene.skybox_name,
            final_shader=scene.final_shader,
            ambient_color=scene.lights.ambient_color,
            sun_light_color=scene.sun_light.color,
            columns=terrain.columns,
            rows=terrain.rows,
            tileset_name=terrain.tileset.name,
            foliage_name=terrain.foliage_set.name,
            scene=scene,
        )

    def clear_terrain_data(self) -> None:
        self.terrain_data = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"version": self.version, "name": self.name}
        if self.skybox is not None:
            data["skybox"] = self.skybox
        data.update(
            {
                "uid": self.uid,
                "finalShader": self.final_shader,
                "ambientColor": self.ambient_color,
                "sunLightColor": self.sun_light_color,
                "columns": self.columns,
                "rows": self.rows,
                "tilesetName": self.tileset_name,
                "foliageName": self.foliage_name,
            }
        )
        if self.terrain_data is not None:
            data["terrainData"] = self.terrain_data
        if self.water_data is not None:
            data["waterData"] = self.water_data.to_dict()
        if self.foliage_data is not None:
            data["foliageData"] = self.foliage_data.to_dict()
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SceneArtifact":
        water = data.get("waterData")
        foliage = data.get("foliageData")
        return SceneArtifact(
            version=int(data.get("version", 0)),
            name=str(data["name"]),
            skybox=data.get("skybox"),
            uid=str(data["uid"]),
            final_shader=str(data["finalShader"]),
            ambient_color=int(data["ambientColor"]),
            sun_light_color=int(data["sunLightColor"]),
            columns=int(data["columns"]),
            rows=int(data["rows"]),
            tileset_name=str(data["tilesetName"]),
            foliage_name=str(data["foliageName"]),
            terrain_data=data.get("terrainData"),
            water_data=WaterData.from_dict(water) if isinstance(water, dict) else None,
            foliage_data=FoliageData.from_dict(foliage) if isinstance(foliage, dict) else None,
        )
