from __future__ import annotations
import importlib.util
import logging
from pathlib import Path
import yaml
from typing import Dict, Any

log = logging.getLogger(__name__)

GAMES_DIR = Path(__file__).resolve().parents[2] / "games"


def load_game_manifest(game_root: Path) -> Dict[str, Any]:
    manifest = game_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {game_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{manifest} must contain a mapping")
    return data


def load_game_module(game_root: Path):
    """
    Loads games/<id>/main.py module and returns the module object.
    The file must define a get_game() -> Game factory.
    """
    main_py = game_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {game_root}")
    module_name = "games." + game_root.name.replace("-", "_") + ".main"
    spec = importlib.util.spec_from_file_location(module_name, main_py)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    if not hasattr(module, "get_game"):
        raise AttributeError("Game module must define get_game()")
    log.debug("loaded %s from %s", module_name, main_py)
    return module
