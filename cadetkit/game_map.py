"""Tile maps for the collect-and-escape game: parsing, wall checks and reachability."""

from __future__ import annotations

import itertools
from collections import Counter
from dataclasses import dataclass
from os import PathLike
from typing import Iterable

WALL = "1"
GROUND = "0"
PLAYER = "P"
COIN = "C"
EXIT = "E"
TILES = frozenset((WALL, GROUND, PLAYER, COIN, EXIT))
TILE_SIZE = 64
MAX_SCANS = 100

_WALKABLE = (GROUND, COIN, EXIT)
_SEEN = "S"
_DONE = "X"
_PLAYER_DONE = "p"
_NEIGHBOURS = ((0, 1), (0, -1), (-1, 0), (1, 0))


class MapError(ValueError):
    """Raised when a map cannot be used."""


@dataclass(frozen=True)
class FloodResult:
    """What a flood fill from the player start could reach."""

    coins: int
    exits: int
    players: int
    expected_coins: int
    timed_out: bool = False

    @property
    def valid(self) -> bool:
        """True when every coin, exactly one exit and exactly one player were found."""
        return self.coins == self.expected_coins and self.exits == 1 and self.players == 1


def _mark(grid: list[list[str]], x: int, y: int, tally: Counter) -> None:
    tile = grid[y][x]
    if tile == COIN:
        tally["coins"] += 1
    elif tile == EXIT:
        tally["exits"] += 1
    grid[y][x] = _SEEN


def _visit(grid: list[list[str]], x: int, y: int, tally: Counter) -> None:
    for dx, dy in _NEIGHBOURS:
        nx, ny = x + dx, y + dy
        if grid[ny][nx] in _WALKABLE:
            _mark(grid, nx, ny, tally)
    if grid[y][x] in (_SEEN, "s", EXIT):
        grid[y][x] = _DONE
    elif grid[y][x] == PLAYER:
        grid[y][x] = _PLAYER_DONE
        tally["players"] += 1


def _scan(grid: list[list[str]], tally: Counter) -> int:
    """One pass over the interior; returns how many cells were expanded."""
    expanded = 0
    height, width = len(grid), len(grid[0])
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if grid[y][x] in (PLAYER, _SEEN):
                _visit(grid, x, y, tally)
                expanded += 1
    return expanded


class GameMap:
    """A rectangular grid of tiles, each one of ``0 1 P C E``."""

    def __init__(self, rows: Iterable[str]) -> None:
        rows = list(rows)
        if not rows or not rows[0]:
            raise MapError("empty map")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MapError(f"row {y} has length {len(row)}, expected {width}")
            if any(ch not in TILES for ch in row):
                raise MapError("Invalid Map Character")
        self.rows: tuple[str, ...] = tuple(rows)
        self.width = width
        self.height = len(rows)

    def tile(self, x: int, y: int) -> str:
        """The tile at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} map")
        return self.rows[y][x]

    def player_start(self) -> tuple[int, int]:
        """Position of the player; with several, the last in reading order."""
        starts = [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, ch in enumerate(row)
            if ch == PLAYER
        ]
        if not starts:
            raise MapError("no player start on the map")
        return starts[-1]

    def coin_count(self) -> int:
        """Number of coin tiles."""
        return sum(row.count(COIN) for row in self.rows)

    def check_walls(self) -> bool:
        """True when the map is closed in by walls on every side."""
        edges = self.rows[0] + self.rows[-1]
        if any(ch != WALL for ch in edges):
            return False
        return all(row[0] == WALL and row[-1] == WALL for row in self.rows[:-1])

    def flood_fill(self) -> FloodResult:
        """Spread out from every player and count the coins, exits and players found.

        At most MAX_SCANS passes are made; ``timed_out`` is set when the
        fill was still growing after the last one.
        """
        grid = [list(row) for row in self.rows]
        tally: Counter = Counter()
        expanded = 1
        scans = 0
        while expanded > 0 and scans < MAX_SCANS:
            expanded = _scan(grid, tally)
            scans += 1
        return FloodResult(
            coins=tally["coins"],
            exits=tally["exits"],
            players=tally["players"],
            expected_coins=self.coin_count(),
            timed_out=expanded > 0,
        )

    def __repr__(self) -> str:
        return f"GameMap({list(self.rows)!r})"


def parse_map(text: str) -> GameMap:
    """Build a map from text, one row per line, ending at the first blank line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return GameMap(itertools.takewhile(bool, lines))


def load_map(path: str | PathLike) -> GameMap:
    """Read and parse a map file."""
    with open(path, encoding="utf-8") as handle:
        return parse_map(handle.read())