"""The dungeon level: a grid of floor and walls with monsters, treasure and the player."""

from __future__ import annotations

import copy as _copy
import json
import random
import sys
from enum import Enum, auto
from pathlib import Path
from typing import Any, List, Optional, TextIO, Tuple, Union

from dungeoncrawl.items import Item, to_item_type

__all__ = [
    "MoveDirection",
    "LevelFormatError",
    "GameMap",
    "DEFAULT_LEVEL_DIR",
    "FLOOR",
    "WALL",
    "MONSTER",
    "TREASURE",
]

DEFAULT_LEVEL_DIR = Path("../resources/level_maps")

FLOOR = "."
WALL = "#"
MONSTER = "M"
TREASURE = "T"

_TILES = {0: FLOOR, 1: WALL}

_REQUIRED_KEYS = ("width", "height", "treasure_pool", "grid", "monsters", "treasures")

Cell = Tuple[int, int]


class MoveDirection(Enum):
    """Direction in which the player can step."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


_STEPS = {
    MoveDirection.UP: (0, -1),
    MoveDirection.DOWN: (0, 1),
    MoveDirection.LEFT: (-1, 0),
    MoveDirection.RIGHT: (1, 0),
}


class LevelFormatError(ValueError):
    """Raised when a level file does not describe a valid level."""


def _is_unsigned(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _unsigned(value: Any, what: str) -> int:
    if not _is_unsigned(value):
        raise LevelFormatError(f"Invalid value for {what}!")
    return value


def _parse_treasure(entry: Any) -> Item:
    if not isinstance(entry, dict) or not all(
        key in entry for key in ("name", "bonus", "type")
    ):
        raise LevelFormatError("Invalid treasure in treasure list!")
    name = entry["name"]
    if not isinstance(name, str):
        raise LevelFormatError("Invalid treasure in treasure list!")
    bonus = _unsigned(entry["bonus"], "treasure bonus")
    type_name = entry["type"]
    if not isinstance(type_name, str):
        raise LevelFormatError("Invalid treasure in treasure list!")
    return Item(name, bonus, to_item_type(type_name))


def _parse_grid(grid_data: Any, width: int, height: int) -> List[List[str]]:
    if not isinstance(grid_data, list):
        raise LevelFormatError("Invalid type used for grid!")
    if len(grid_data) != height:
        raise LevelFormatError("Grid height is incorrect!")
    grid: List[List[str]] = []
    for row in grid_data:
        if not isinstance(row, list):
            raise LevelFormatError("Invalid inner grid!")
        if len(row) != width:
            raise LevelFormatError("Invalid grid width!")
        cells = []
        for value in row:
            if not _is_unsigned(value) or value not in _TILES:
                raise LevelFormatError("Invalid grid element!")
            cells.append(_TILES[value])
        grid.append(cells)
    return grid


class GameMap:
    """A dungeon level loaded from ``level<N>.json`` files in a level directory.

    Levels are numbered from 1; each call to :meth:`load_next_map` loads the
    next one. The player starts on the first floor cell in row order, and the
    level's monsters and treasures are scattered over the other floor cells.
    """

    def __init__(
        self,
        level_dir: Union[str, Path] = DEFAULT_LEVEL_DIR,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.level_dir = Path(level_dir)
        self._rng = rng if rng is not None else random.Random()
        self.level = 0
        self.width = 0
        self.height = 0
        self.monsters = 0
        self.treasures = 0
        self.treasure_pool: List[Item] = []
        self.grid: List[List[str]] = []
        self.player_x = 0
        self.player_y = 0
        self.load_next_map()

    def copy(self) -> GameMap:
        """Return an independent copy of the map and its state."""
        return _copy.deepcopy(self)

    def load_next_map(self) -> None:
        """Load the next level file, replacing the grid and adding to the treasure pool."""
        self.level += 1
        path = self.level_dir / f"level{self.level}.json"
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)

        if not isinstance(data, dict) or not all(key in data for key in _REQUIRED_KEYS):
            raise LevelFormatError("Invalid format of level map file!")

        width = _unsigned(data["width"], "width")
        height = _unsigned(data["height"], "height")
        monsters = _unsigned(data["monsters"], "monsters")
        treasures = _unsigned(data["treasures"], "treasures")

        pool_data = data["treasure_pool"]
        if not isinstance(pool_data, list):
            raise LevelFormatError("Invalid treasure in treasure list!")
        new_items = [_parse_treasure(entry) for entry in pool_data]

        grid = _parse_grid(data["grid"], width, height)
        free = [
            (x, y)
            for y, row in enumerate(grid)
            for x, tile in enumerate(row)
            if tile == FLOOR
        ]
        if not free:
            raise LevelFormatError("Grid has no free space for the player!")
        (player_x, player_y), rest = free[0], free[1:]

        self._place_randomly(grid, rest, MONSTER, monsters)
        self._place_randomly(grid, rest, TREASURE, treasures)

        self.width = width
        self.height = height
        self.monsters = monsters
        self.treasures = treasures
        self.treasure_pool.extend(new_items)
        self.grid = grid
        self.player_x = player_x
        self.player_y = player_y

    def display_map(self, stream: Optional[TextIO] = None) -> None:
        """Write the grid, level stats and treasure pool to ``stream`` (stdout by default)."""
        out = sys.stdout if stream is None else stream
        lines = [
            "".join(
                " P " if (x, y) == (self.player_x, self.player_y) else f" {tile} "
                for x, tile in enumerate(row)
            )
            for y, row in enumerate(self.grid)
        ]
        lines += [
            "",
            "---LEVEL STATS---",
            f"Monsters: {self.monsters}",
            f"Treasures: {self.treasures}",
            "",
            "---TREASURE POOL---",
        ]
        lines += [str(item) for item in self.treasure_pool]
        out.write("\n".join(lines) + "\n")

    def move_player(self, direction: MoveDirection) -> bool:
        """Step the player one cell; return whether the move was possible."""
        try:
            dx, dy = _STEPS[direction]
        except (KeyError, TypeError):
            raise ValueError("Invalid movement direction!") from None
        x, y = self.player_x + dx, self.player_y + dy
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        if self.grid[y][x] == WALL:
            return False
        self.player_x, self.player_y = x, y
        return True

    def start_fight(self) -> bool:
        """Whether the player stands on a monster."""
        return self.grid[self.player_y][self.player_x] == MONSTER

    def loot_treasure(self) -> bool:
        """Whether the player stands on a treasure."""
        return self.grid[self.player_y][self.player_x] == TREASURE

    def _place_randomly(
        self, grid: List[List[str]], cells: List[Cell], tile: str, amount: int
    ) -> None:
        open_cells = [(x, y) for x, y in cells if grid[y][x] == FLOOR]
        if amount > len(open_cells):
            raise LevelFormatError(
                f"Not enough free space to place {amount} of {tile!r}!"
            )
        for x, y in self._rng.sample(open_cells, amount):
            grid[y][x] = tile