# cadetkit

A small toolkit with no dependencies. It has these parts:

- **`cadetkit.chars`** has character tests (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`) and case conversion (`to_upper`,
  `to_lower`). Each takes a one-character string or an integer code.
  It also has two integer parsers:
  - `atoi` skips leading whitespace, accepts one sign and stops at the first
    non-digit. A positive value above 2147483647 gives -1. A negative value
    below -2147483648 gives 0.
  - `lenient_atoi` skips every character before the first digit, signs
    included, and reads the digits from there. It raises `ValueError` when
    the text holds no digit.
- **`cadetkit.memory`** has byte-buffer helpers for `bytearray` and `bytes`:
  `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove`.
  - `memmove` moves a region within one buffer, given by offsets.
  - Negative lengths and regions that run past the end of a buffer raise
    `ValueError`.
- **`cadetkit.strings`** has classic string routines that return Python
  values: `split`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`,
  `strlcat`, `substr` and `strjoin`.
  - The search functions return an index, or `None` when there is no match.
  - `strlcpy` and `strlcat` return a pair: the resulting text and the length
    they tried to create.
- **`cadetkit.formatting`** is a small printf.
  - `format_message` expands `%c %s %d %i %u %x %X %p %%`. An unknown
    conversion character stands for itself.
  - `printf` writes the expanded text to standard output and returns its
    length.
  - `to_hex` and `int_len` are helpers.
- **`cadetkit.linereader`** reads lines.
  - `LineReader` reads a text or binary stream through a buffer of a fixed
    size, one line at a time. Each line keeps its trailing newline.
    `read_line` returns `None` at the end of the stream.
  - `read_lines` is a generator over the same reader.
- **`cadetkit.stack`** has `Stack`, an ordered sequence of integers with
  `append`, `attach`, `last` and `swap_values`. `parse_stack` builds a stack
  from strings with `atoi`.
- **`cadetkit.game_map`** and **`cadetkit.game`** make up a text-mode maze
  game. `parse_map` and `load_map` read a map into a `GameMap`, and `Game`
  plays it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from cadetkit.chars import atoi
from cadetkit.strings import split
from cadetkit.formatting import format_message

atoi("   -42abc")               # -42
split("hello  world", " ")      # ["hello", "world"]
format_message("%d items, %x", 3, 255)   # "3 items, ff"
```

This reads a file line by line:

```python
from cadetkit.linereader import read_lines

with open("notes.txt") as stream:
    for line in read_lines(stream, 4):
        print(line, end="")
```

## Maps

A map is a rectangle of these characters:

| Character | Meaning |
|-----------|---------|
| `1` | wall |
| `0` | floor |
| `P` | the player's start |
| `C` | a coin |
| `E` | the exit |

```
1111111
1P0C0E1
1111111
```

`GameMap` raises `MapError` in these cases:

- The map is empty.
- The rows differ in length.
- The map holds a character that is not in the table.

`player_start` also raises `MapError` when there is no player.

Two further checks return results instead of raising:

- `check_walls()` returns `True` when walls close the map in on every side.
- `flood_fill()` spreads out from the start and returns a `FloodResult`. It
  holds the number of coins, exits and players reached. Its `valid` property
  is true when every coin, exactly one exit and exactly one player were
  found.

`Game` tracks the player and the coins.

- `handle_key` reacts to a key code from `Key`: `UP`, `DOWN`, `LEFT`,
  `RIGHT` or `ESC`.
- `move` steps one tile and collects any coin on it.
- `render` returns the map as text.
- The game raises `GameOver` on `ESC`. It also raises it when the player
  reaches the exit with every coin collected. Its `won` attribute tells the
  two cases apart.

## Commands

```
cadetkit-lines FILE [FILE ...]   # print the lines of the files side by side, numbered
cadetkit-stack 3 1 2             # build a stack from the arguments, add 69 at the end, print it
cadetkit-game MAP                # play the maze game on the given map file
```

Without file arguments, `cadetkit-lines` reads `test.txt` and `test2.txt`.

`cadetkit-game` checks the map first. It then reads commands from standard
input, one per line: `w`, `a`, `s` and `d` move the player, and `q` quits.
After each move it prints the move count, the coins collected and the map.

## What it does not do

The game has no graphical window, no images and no live keyboard input. It
draws the map as text and reads moves as lines from standard input.