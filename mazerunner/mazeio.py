"""Reading a maze and its placement from text input, and printing mazes."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from mazerunner.world import Coordinate

ALLOWED_CELLS = ("x", ".", "e")
BASE_OFFSET = Coordinate(1, 0, 1)


class MazeInputError(ValueError):
    """Raised when text input does not describe a valid maze."""


class _TokenStream:
    """Whitespace-separated words from chunks of text, readable a word or a character at a time."""

    def __init__(self, source: Iterable[str] | str):
        if isinstance(source, str):
            source = [source]
        self._chunks = iter(source)
        self._words: deque[str] = deque()

    def word(self) -> str:
        while not self._words:
            chunk = next(self._chunks, None)
            if chunk is None:
                raise EOFError("end of input")
            self._words.extend(chunk.split())
        return self._words.popleft()

    def char(self) -> str:
        word = self.word()
        if len(word) > 1:
            self._words.appendleft(word[1:])
        return word[0]


def _stream(tokens) -> _TokenStream:
    return tokens if isinstance(tokens, _TokenStream) else _TokenStream(tokens)


def read_base_point(world, tokens) -> Coordinate:
    """Ask the player to confirm their position; the maze starts diagonally next to it."""
    stream = _stream(tokens)
    print("Stand in Minecraft and type 'done': ", end="")
    if stream.word() != "done":
        raise MazeInputError("Error: type 'done' to set base point.")
    return world.get_player_position() + BASE_OFFSET


def read_length_width(tokens) -> tuple[int, int]:
    """Read the maze length and width, both odd and at least 3."""
    stream = _stream(tokens)
    print("Enter the length and width of maze: ", end="")
    message = "Length and width must be odd numbers >= 3!"
    try:
        xlength = int(stream.word())
        zlength = int(stream.word())
    except ValueError as exc:
        raise MazeInputError(message) from exc
    if xlength < 3 or zlength < 3 or xlength % 2 == 0 or zlength % 2 == 0:
        raise MazeInputError(message)
    return xlength, zlength


def read_maze(world, tokens) -> tuple[list[str], Coordinate]:
    """Read the base point, the size and the maze cells; return the rows and the base point."""
    stream = _stream(tokens)
    base = read_base_point(world, stream)
    xlength, zlength = read_length_width(stream)

    print("Enter the maze structure row-by-row (x . e):")
    rows = []
    for _ in range(zlength):
        row = []
        for _ in range(xlength):
            cell = stream.char()
            if cell not in ALLOWED_CELLS:
                raise MazeInputError(f"Invalid character: {cell}. Allowed: x . e")
            row.append(cell)
        rows.append("".join(row))
    return rows, base


def format_maze(rows) -> str:
    """The printed form of a maze given as strings or sequences of characters."""
    lines = ["**Printing Maze Structure**"]
    lines.extend("".join(row) for row in rows)
    lines.append("**End Printing Maze**")
    return "\n".join(lines) + "\n"


def print_maze(rows) -> None:
    print(format_maze(rows), end="")