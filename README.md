# solong

Reads and checks the `.ber` tile maps used by a small collect-and-escape
puzzle game. Once a map has passed every check, it prints the map.

A map is a rectangle of characters (`solong.mapfile.Tile`):

| Char | Tile          | Meaning      |
|------|---------------|--------------|
| `1`  | `WALL`        | wall         |
| `0`  | `FLOOR`       | floor        |
| `P`  | `PLAYER`      | player start |
| `E`  | `EXIT`        | exit         |
| `C`  | `COLLECTIBLE` | collectible  |
| `X`  | `ENEMY`       | enemy        |

A map is valid when all of the following hold:

- the file name ends in `.ber`;
- the file is not empty, every row is the same length, and every row holds
  only the characters above;
- it has exactly one `P`, exactly one `E` and at least one `C`;
- the first and last rows and the first and last columns are all walls;
- starting from `P` and moving up, down, left and right through tiles that are
  not walls, the exit and at least one collectible can both be reached.

## Installation

```
pip install .
```

## Command line

```
solong maps/level1.ber
```

The same command can also be run as `python -m solong.cli maps/level1.ber`.

If the map is valid, the command prints it row by row to standard output and
exits with status 0. Otherwise it prints one of these messages and exits with
status 1:

- `Invalid number of arguments`: the command was not given exactly one
  argument;
- `Invalid map or file`: the name does not end in `.ber`, the file cannot be
  read, or its rows, tiles or tile counts are wrong;
- `Invalid map`: the walls do not enclose the map, or the exit or every
  collectible is out of reach.

## Library

```python
import sys

from solong.mapfile import MapError, has_ber_extension, load_map

path = "maps/level1.ber"
if has_ber_extension(path):
    try:
        game_map = load_map(path)   # shape and tile-count checks
        game_map.validate()         # border and reachability checks
    except MapError as exc:
        print(exc)
    else:
        sys.stdout.write(game_map.render())
```

`load_map` returns a frozen `GameMap` with these members:

- `rows`: the rows as a tuple of strings;
- `player_pos`: the player's `(row, column)`;
- `row_count` and `col_count`;
- `count(tile)`: the number of cells that hold a tile;
- `check_borders()` and `check_escape()`, which return booleans;
- `validate()`, which raises `MapError` (a `ValueError`) if either check fails;
- `render()`, which returns the map as text with one row per line.

### Helper modules

- `solong.lines.LineReader` reads a text or binary stream one line at a time
  through a fixed-size buffer. Use `read_line()` or iterate over the reader.
- `solong.output` has `putchar`, `putstr`, `putendl` and `putnbr`, which write
  to a stream (standard output by default). It also has `format_base`,
  `format_address`, and `format_printf`/`printf`, which handle the conversions
  `%c %s %p %d %i %u %x %X %%`.
- `solong.numbers` has `atoi`, which wraps values to 32 bits; `atol`, which
  raises `OverflowError` for values outside the 32-bit range; and `itoa`.
- `solong.chars` has ASCII classification and case conversion on integer
  codes.
- `solong.strsearch` and `solong.strbuild` provide string search, comparison,
  bounded copying, joining, slicing, trimming, splitting and mapping.
- `solong.memory` fills, searches, compares, copies and moves bytes in
  `bytearray` buffers.
- `solong.linkedlist.DoublyLinkedList` is a doubly linked list of `Node`s with
  `push_back`, `push_front`, `clear`, `for_each`, `map`, `len()` and iteration.

## What it does not do

The package only loads, checks and prints maps. It does not open a window,
draw tiles, or let anyone play the game. The `TILE_SIZE` constant in
`solong.mapfile` is defined but nothing uses it.

## Tests

```
pip install ".[test]"
pytest
```