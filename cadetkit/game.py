"""The collect-and-escape game: move over the map, gather every coin, reach the exit."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Sequence

from cadetkit.game_map import COIN, EXIT, GROUND, PLAYER, WALL, GameMap, MapError, load_map


class Key(IntEnum):
    """Key codes the game reacts to."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 13
    ESC = 53


_DIRECTIONS = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.RIGHT: (1, 0),
    Key.LEFT: (-1, 0),
}

_COMMANDS = {
    "w": Key.UP,
    "s": Key.DOWN,
    "a": Key.LEFT,
    "d": Key.RIGHT,
    "q": Key.ESC,
    "esc": Key.ESC,
}


class GameOver(Exception):
    """Raised when the game ends, by escaping or by quitting."""

    def __init__(self, won: bool, moves: int) -> None:
        super().__init__("escaped" if won else "quit")
        self.won = won
        self.moves = moves


class Game:
    """The state of one game on a map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self._grid = [list(row) for row in game_map.rows]
        self.position = game_map.player_start()
        self.total_coins = game_map.coin_count()
        self.coins = self.total_coins
        self.moves = 0

    def _passable(self, x: int, y: int) -> bool:
        return (
            0 <= y < len(self._grid)
            and 0 <= x < len(self._grid[y])
            and self._grid[y][x] != WALL
        )

    def handle_key(self, key: int) -> bool:
        """React to a key code; return True when the player moved.

        ESC raises GameOver. Unknown keys are ignored.
        """
        try:
            key = Key(key)
        except ValueError:
            return False
        if key is Key.ESC:
            raise GameOver(won=False, moves=self.moves)
        return self.move(*_DIRECTIONS[key])

    def move(self, dx: int, dy: int) -> bool:
        """Step one tile; return False when a wall is in the way.

        Stepping on a coin collects it. Stepping on the exit with every
        coin collected raises GameOver.
        """
        if abs(dx) + abs(dy) != 1:
            raise ValueError(f"a move is one tile in one direction, got ({dx}, {dy})")
        x, y = self.position
        nx, ny = x + dx, y + dy
        if not self._passable(nx, ny):
            return False
        self.position = (nx, ny)
        self.moves += 1
        tile = self._grid[ny][nx]
        if tile == COIN:
            self._grid[ny][nx] = GROUND
            self.coins -= 1
        elif tile == EXIT and self.coins == 0:
            raise GameOver(won=True, moves=self.moves)
        return True

    def render(self) -> str:
        """The map as text, with the player drawn where it stands."""
        lines = []
        for y, row in enumerate(self._grid):
            cells = []
            for x, tile in enumerate(row):
                if (x, y) == self.position:
                    cells.append(PLAYER)
                elif tile == PLAYER:
                    cells.append(GROUND)
                else:
                    cells.append(tile)
            lines.append("".join(cells))
        return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named by the one argument and play it from standard input.

    Commands are w, a, s, d to move and q to quit, one per line.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    path = args[0]
    try:
        game_map = load_map(path)
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1
    except OSError as exc:
        print(f"Error\n{path}: {exc.strerror}")
        return 1
    result = game_map.flood_fill()
    if result.timed_out:
        print("timeout!")
    print(
        f"Coins found = {result.coins}/{result.expected_coins}\n"
        f"Exits found = {result.exits}/1\n"
        f"Players found = {result.players}/1"
    )
    if not result.valid or not game_map.check_walls():
        print("Error\nSomething went wrong!")
        return 1
    game = Game(game_map)
    print(game.render())
    for line in sys.stdin:
        key = _COMMANDS.get(line.strip().lower())
        if key is None:
            continue
        try:
            moved = game.handle_key(key)
        except GameOver as over:
            if over.won:
                print(f"You escaped in {over.moves} moves")
            return 0
        if moved:
            collected = game.total_coins - game.coins
            print(f"moves = {game.moves}\ncoins = {collected}/{game.total_coins}")
            print(game.render())
    return 0