import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from fabula.world import (  # noqa: E402
    AssetCatalog,
    AutoTiles,
    AutoTileType,
    FoliageSet,
    Scene,
    Tile,
    Tileset,
)


@pytest.fixture
def tileset() -> Tileset:
    return Tileset("overworld", [AutoTiles("grass"), AutoTiles("sand"), AutoTiles("water")])


@pytest.fixture
def foliage_set() -> FoliageSet:
    return FoliageSet("forest", ["bush", "tall_grass", "fern"])


@pytest.fixture
def catalog(tileset: Tileset, foliage_set: FoliageSet) -> AssetCatalog:
    return AssetCatalog(tilesets=[tileset], foliage_sets=[foliage_set])


@pytest.fixture
def make_scene(tileset: Tileset, foliage_set: FoliageSet):
    """Factory for fully populated scenes with varied, float32-exact tile values."""

    def _make(columns: int = 3, rows: int = 2, uid: str = "map-001", name: str = "Meadow") -> Scene:
        scene = Scene(name, uid, columns, rows)
        terrain = scene.terrain
        terrain.tileset = tileset
        terrain.foliage_set = foliage_set
        families = ["grass", "sand", "water"]
        variants = list(AutoTileType)
        regions = [None, "bush", "tall_grass", "fern"]
        for z in range(rows):
            for x in range(columns):
                i = z * columns + x
                family = tileset.get_auto_tiles(families[i % len(families)])
                region = regions[i % len(regions)]
                tile = Tile(
                    x=x,
                    z=z,
                    gid=i + 1,
                    y=0.5 * i,
                    y1=0.25,
                    y2=-1.5,
                    y3=2.0,
                    y4=0.125 * i,
                    auto_tile=family.get_auto_tile(variants[i % len(variants)]),
                    passable=i % 3 != 0,
                    liquid=i % 4 == 1,
                    liquid_height=0.75 if i % 4 == 1 else 0.0,
                    foliage=foliage_set.find_descriptor(region) if region else None,
                )
                terrain.set_tile(x, z, tile)
        scene.final_shader = "bloom"
        scene.skybox_name = "sunset"
        scene.lights.ambient_color = 0x7F7F7FFF - (1 << 31)
        scene.sun_light.color = 123456
        scene.water.alpha = 0.5
        scene.water.water_material = "lake"
        scene.foliage.amplitude = 0.25
        scene.foliage.speed = 2.0
        return scene

    return _make
