# src/gridsnake/__init__.py
"""Grid snake game: engine plus a pygame front-end."""

from .game import (
    Cell,
    CellKind,
    Direction,
    FoodPlacementError,
    GameState,
    Snapshot,
    new_game_state,
    spawn_food,
)

__all__ = [
    "Cell",
    "CellKind",
    "Direction",
    "FoodPlacementError",
    "GameState",
    "Snapshot",
    "new_game_state",
    "spawn_food",
]
