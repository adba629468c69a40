"""Loading and checking tile maps stored in ``.ber`` files."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .lines import LineReader

TILE_SIZE = 64
MAP_EXTENSION = ".ber"

PathLike = Union[str, Path]


class Tile(str, Enum):
    """The characters a map may contain."""

    FLOOR = "0"
    WALL = "1"
    PLAYER = "P"
    EXIT = "E"
    COLLECTIBLE = "C"
    ENEMY = "X"


_TILE_CHARS = frozenset(tile.value for tile in Tile)


class MapError(ValueError):
    """Raised when a map file cannot be read or describes an invalid map."""


def has_ber_extension(path: PathLike) -> bool:
    """Return True if the file name ends with ``.ber``."""
    return str(path).endswith(MAP_EXTENSION)


@dataclass(frozen=True)
class GameMap:
    """A rectangular grid of tiles with exactly one player and one exit."""

    rows: Tuple[str, ...]
    player_pos: Tuple[int, int]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def count(self, tile: Union[Tile, str]) -> int:
        """Return how many cells hold ``tile``."""
        char = tile.value if isinstance(tile, Tile) else tile
        return sum(row.count(char) for row in self.rows)

    def _tile_at(self, row: int, col: int) -> Optional[str]:
        if 0 <= row < self.row_count and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return None

    def check_borders(self) -> bool:
        """Return True if the first and last rows and columns are all walls."""
        if not self.rows:
            return False
        wall = Tile.WALL.value
        last_col = self.col_count - 1
        top, bottom = self.rows[0], self.rows[-1]
        return (
            all(char == wall for char in top)
            and all(char == wall for char in bottom)
            and all(row[0] == wall and row[last_col] == wall for row in self.rows)
        )

    def check_escape(self) -> bool:
        """Return True if the player can reach the exit and at least one collectible."""
        found_exit = False
        found_collectible = False
        visited = set()
        stack = [self.player_pos]
        while stack:
            row, col = stack.pop()
            if (row, col) in visited:
                continue
            char = self._tile_at(row, col)
            if char is None or char == Tile.WALL.value:
                continue
            visited.add((row, col))
            if char == Tile.EXIT.value:
                found_exit = True
            elif char == Tile.COLLECTIBLE.value:
                found_collectible = True
            stack.extend(
                ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1))
            )
        return found_exit and found_collectible

    def validate(self) -> None:
        """Raise MapError unless the map is walled in and can be escaped."""
        if not self.check_borders() or not self.check_escape():
            raise MapError("Invalid map")

    def render(self) -> str:
        """Return the map as text, one row per line."""
        return "".join(row + "\n" for row in self.rows)


def _parse_rows(lines: Iterable[str]) -> GameMap:
    rows: List[str] = [line[:-1] if line.endswith("\n") else line for line in lines]
    if not rows:
        raise MapError("map is empty")
    width = len(rows[0])
    player: Optional[Tuple[int, int]] = None
    for index, row in enumerate(rows):
        if len(row) != width:
            raise MapError(f"row {index} is not {width} characters wide")
        if not set(row) <= _TILE_CHARS:
            raise MapError(f"row {index} holds an unknown tile")
        col = row.rfind(Tile.PLAYER.value)
        if col >= 0:
            player = (index, col)
    counts = Counter("".join(rows))
    if counts[Tile.COLLECTIBLE.value] == 0:
        raise MapError("map has no collectible")
    if counts[Tile.PLAYER.value] != 1:
        raise MapError("map must have exactly one player")
    if counts[Tile.EXIT.value] != 1:
        raise MapError("map must have exactly one exit")
    assert player is not None
    return GameMap(rows=tuple(rows), player_pos=player)


def load_map(path: PathLike) -> GameMap:
    """Read a map file and check its shape and tile counts.

    Raises MapError if the file cannot be read, its rows differ in width,
    it holds an unknown tile, it has no collectible, or it does not have
    exactly one player and one exit.
    """
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            lines = list(LineReader(stream))
    except OSError as exc:
        raise MapError(f"cannot read {path}") from exc
    return _parse_rows(lines)