import argparse
import logging
import sys
from pathlib import Path

from .logging_config import configure_logging
from .persistence import PersistenceError, SceneLifecycle, SceneStore, read_document, read_scene_text, unpack
from .persistence.store import SUFFIXES
from .settings import load_settings
from .world import AssetCatalog


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="fabula-scene",
        description="Inspect and list Fabula scene documents.",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    inspect = sub.add_parser("inspect", help="Print the header and terrain sizes of a scene file.")
    inspect.add_argument("path", type=Path, help="Scene document (.scene.yaml or .scene.json)")

    list_ = sub.add_parser("list", help="List scenes in a scene directory.")
    list_.add_argument("--dir", dest="scenes_dir", type=Path, default=None, help="Scene directory")
    return parser.parse_args(argv)


def _format_for(path: Path) -> str:
    return "json" if path.name.endswith(SUFFIXES["json"]) else "yaml"


def inspect_scene(path: Path, settings) -> None:
    artifact = read_document(read_scene_text(path), _format_for(path))
    try:
        blob = artifact.terrain_data or ""
        print(f"uid:          {artifact.uid}")
        print(f"name:         {artifact.name}")
        print(f"version:      {artifact.version}")
        print(f"size:         {artifact.columns}x{artifact.rows}")
        print(f"tileset:      {artifact.tileset_name}")
        print(f"foliage set:  {artifact.foliage_name}")
        print(f"skybox:       {artifact.skybox or '-'}")
        print(f"final shader: {artifact.final_shader}")
        print(f"terrain blob: {len(blob)} chars")
        print(f"terrain data: {len(unpack(blob, settings))} bytes")
    finally:
        SceneLifecycle(settings).release(artifact)


def list_scenes(scenes_dir, settings) -> None:
    store = SceneStore(AssetCatalog(), root_dir=scenes_dir, settings=settings)
    for summary in store.list_scenes():
        print(f"{summary.uid}\t{summary.name}\t{summary.columns}x{summary.rows}\t{summary.path.name}")


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else logging.WARNING)
    settings = load_settings(user_path=args.settings_path)

    try:
        if args.command == "inspect":
            inspect_scene(args.path, settings)
        else:
            list_scenes(args.scenes_dir, settings)
    except (OSError, PersistenceError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
