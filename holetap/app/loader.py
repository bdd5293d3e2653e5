from __future__ import annotations
import importlib.machinery
import importlib.util
import sys
from pathlib import Path
import yaml
from typing import Dict, Any

# resolves inside a source checkout; launchers pass their own games dir
GAMES_DIR = Path(__file__).resolve().parents[2] / "games"


def game_root_for(game_id: str, games_dir: Path = GAMES_DIR) -> Path:
    root = games_dir / game_id
    if not root.is_dir():
        raise FileNotFoundError(f"No game named {game_id!r} under {games_dir}")
    return root


def load_game_manifest(game_root: Path) -> Dict[str, Any]:
    """
    Reads games/<id>/manifest.yaml. `options` is always present in the result
    (possibly empty) so games can `.get()` from it directly.
    """
    manifest = game_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {game_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"manifest.yaml in {game_root} must be a mapping")
    if data.get("options") is None:
        data["options"] = {}
    return data


def _register_game_package(game_root: Path) -> str:
    # game folders use dashes, so give them an importable package name that
    # lets main.py use relative imports for its sibling modules
    name = "games." + game_root.name.replace("-", "_")
    if name not in sys.modules:
        spec = importlib.machinery.ModuleSpec(name, None, is_package=True)
        spec.submodule_search_locations = [str(game_root)]
        sys.modules[name] = importlib.util.module_from_spec(spec)
    return name


def load_game_module(game_root: Path):
    """
    Loads games/<id>/main.py module and returns the module object.
    The file must define a get_game() -> Game factory.
    """
    main_py = game_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {game_root}")
    package = _register_game_package(game_root)
    spec = importlib.util.spec_from_file_location(f"{package}.main", main_py)
    module = importlib.util.module_from_spec(spec)
    assert spec and spec.loader
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)  # type: ignore[attr-defined]
    if not hasattr(module, "get_game"):
        raise AttributeError("Game module must define get_game()")
    return module
