"""
paths.py – central paths for the weather dashboard.

The idea is that you can always write:
    from src.paths import ASSETS, DATA, root_path, data_path

…and get the right path whether the app is started from the project root
(streamlit run main.py / uvicorn api:app) or from somewhere else.
"""

from __future__ import annotations

from pathlib import Path

_THIS_FILE = Path(__file__).resolve()

# src/paths.py -> src -> project root
ROOT_DIR = _THIS_FILE.parent.parent

SRC = ROOT_DIR / "src"
ASSETS = ROOT_DIR / "assets"
DATA = ROOT_DIR / "data"
LOGS = ROOT_DIR / "logs"


def root_path(*parts: str) -> Path:
    """Return a path relative to the project root."""
    return ROOT_DIR.joinpath(*parts)


def asset_path(*parts: str) -> Path:
    """Return a path inside the assets folder."""
    return ASSETS.joinpath(*parts)


def data_path(*parts: str) -> Path:
    """Return a path inside the data folder."""
    return DATA.joinpath(*parts)


def ensure_dirs() -> None:
    """Make sure the writable folders (logs/, data/) exist."""
    LOGS.mkdir(parents=True, exist_ok=True)
    DATA.mkdir(parents=True, exist_ok=True)
