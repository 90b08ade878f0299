# dungeoncrawl

Dungeon levels for a small grid-based role-playing game. Each level is a grid
of floor and walls that is read from a JSON file. Monsters and treasures are
scattered at random over the free floor, and the player can be moved around
the grid.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
dungeoncrawl [--levels DIR]
```

This loads `level1.json` from `DIR` and prints the level. `DIR` defaults to
`../resources/level_maps`, which is relative to the current directory. In the
printout, walls are `#`, free floor is `.`, monsters are `M`, treasures are `T`
and the player is `P`. After the grid come the level's monster and treasure
counts and then its treasure pool, one item per line. If the file cannot be
read or is not a valid level, the error is printed to standard error and the
command exits with status 1.

## Level files

Levels are numbered JSON files named `level1.json`, `level2.json`, and so on.
Each file must be an object with these keys:

- `width`, `height`: the size of the grid, as non-negative integers
- `monsters`, `treasures`: how many of each to place on free cells
- `treasure_pool`: a list of items. Each item has a `name` (string), a `bonus`
  (non-negative integer) and a `type` (`"weapon"` or `"spell"`)
- `grid`: `height` rows of `width` numbers each, with `0` for floor and `1`
  for wall

The player starts on the first floor cell in row order. Monsters are placed
first and treasures after them, each on a distinct free floor cell other than
the player's start.

Loading raises `dungeoncrawl.game_map.LevelFormatError` (a `ValueError`) in
these cases:

- a key is missing
- a value has the wrong type
- the grid does not match `width` and `height`
- a cell is anything other than `0` or `1`
- the grid has no floor cell
- there is not enough free floor for the monsters and treasures

An unknown item `type` raises `ValueError`. A missing file raises an `OSError`.

## Using the library

```python
import random
import sys

from dungeoncrawl.game_map import GameMap, MoveDirection

level = GameMap("levels", rng=random.Random(7))
level.display_map(sys.stdout)

if level.move_player(MoveDirection.RIGHT):
    if level.start_fight():
        print("A monster!")
    elif level.loot_treasure():
        print("Treasure!")
```

`GameMap(level_dir, rng)` loads level 1 as soon as it is created. Pass a
`random.Random` instance as `rng` for repeatable placement.

- `load_next_map()` moves on to the next numbered level. It replaces the grid
  and the counts, and adds that level's items to `treasure_pool`.
- `move_player(direction)` takes one step in a `MoveDirection` (`UP`, `DOWN`,
  `LEFT`, `RIGHT`). It returns `False`, without moving, when a wall or the edge
  of the grid is in the way. If the direction is not a `MoveDirection`, it
  raises `ValueError`.
- `start_fight()` and `loot_treasure()` report whether the player is standing
  on a monster or a treasure.
- `copy()` returns an independent copy of the map.
- `display_map(stream)` writes the same printout as the command. It writes to
  standard output when no stream is given.

The map exposes its state as attributes:

- `level`, `width`, `height`
- `monsters`, `treasures`
- `treasure_pool`, `grid`
- `player_x`, `player_y`

Items live in `dungeoncrawl.items`. An `Item` has a `name`, a `bonus` and an
`item_type`. `to_item_type("weapon")` gives `ItemType.WEAPON`, and
`to_item_type("spell")` gives `ItemType.SPELL`. Any other string raises
`ValueError`, and the match is case-sensitive. Printing an item gives a line
such as `Fireball, Multiplier: 20, Type: Spell`.

## What it does not do

The package has no player characters and no monster combatants. There are no
races, classes, stats, health or damage. `start_fight()` only tells you that
the player is on a monster cell; nothing fights. Items are data in the treasure
pool: nothing picks them up or equips them. The command prints the first level
and exits. It is not an interactive game loop.