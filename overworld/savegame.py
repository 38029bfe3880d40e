"""Save file handling and player placement helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from overworld.constants import PLAYER_HEIGHT, PLAYER_WIDTH, TILE_SIZE
from overworld.geometry import Vec2

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_SAVE_PATH = Path("../save.data")

SAVE_TEMPLATE = (
    "version = 0.1\n"
    "\n"
    "player:\n"
    "map = 0\n"
    "x = 0\n"
    "y = 0\n"
    "items:\n"
    "items-end\n"
    "quests:\n"
    "quests-end\n"
    "player-end\n"
)


def has_previous_save(path: PathLike = DEFAULT_SAVE_PATH) -> bool:
    """Report whether a readable save file exists at ``path``."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def reset_save_data(path: PathLike = DEFAULT_SAVE_PATH) -> None:
    """Replace any save file at ``path`` with a fresh one."""
    target = Path(path)
    if has_previous_save(target):
        target.unlink()
    target.write_text(SAVE_TEMPLATE, encoding="utf-8")


def center_in_tile(x: int, y: int) -> Vec2:
    """Tile-space position that centres the player's box inside tile (x, y)."""
    return Vec2(
        x + (TILE_SIZE - PLAYER_WIDTH) / (2.0 * TILE_SIZE),
        y + (TILE_SIZE - PLAYER_HEIGHT) / (2.0 * TILE_SIZE),
    )