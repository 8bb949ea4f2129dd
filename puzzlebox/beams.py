"""Lava floor contraption: trace light beams through mirrors and splitters."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

Position = tuple[int, int]


class GridParseError(ValueError):
    """Raised when a contraption grid cannot be parsed."""


class CardinalDirection(Enum):
    """The direction a beam is travelling in."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    def reverse(self) -> CardinalDirection:
        """The opposite direction."""
        return _REVERSE[self]

    def rotate_slash(self) -> CardinalDirection:
        """The direction after bouncing off a ``/`` mirror."""
        return _SLASH[self]

    def rotate_backslash(self) -> CardinalDirection:
        """The direction after bouncing off a ``\\`` mirror."""
        return _BACKSLASH[self]

    def split(self) -> tuple[CardinalDirection, CardinalDirection]:
        """The two directions a splitter sends a perpendicular beam in."""
        if self in (CardinalDirection.EAST, CardinalDirection.WEST):
            return CardinalDirection.NORTH, CardinalDirection.SOUTH
        return CardinalDirection.EAST, CardinalDirection.WEST

    def step(self, position: Position) -> Position:
        """The position one step from ``position`` in this direction."""
        row, col = position
        return {
            CardinalDirection.NORTH: (row - 1, col),
            CardinalDirection.SOUTH: (row + 1, col),
            CardinalDirection.EAST: (row, col + 1),
            CardinalDirection.WEST: (row, col - 1),
        }[self]


_REVERSE = {
    CardinalDirection.NORTH: CardinalDirection.SOUTH,
    CardinalDirection.EAST: CardinalDirection.WEST,
    CardinalDirection.SOUTH: CardinalDirection.NORTH,
    CardinalDirection.WEST: CardinalDirection.EAST,
}

_SLASH = {
    CardinalDirection.NORTH: CardinalDirection.EAST,
    CardinalDirection.EAST: CardinalDirection.NORTH,
    CardinalDirection.SOUTH: CardinalDirection.WEST,
    CardinalDirection.WEST: CardinalDirection.SOUTH,
}

_BACKSLASH = {
    CardinalDirection.NORTH: CardinalDirection.WEST,
    CardinalDirection.EAST: CardinalDirection.SOUTH,
    CardinalDirection.SOUTH: CardinalDirection.EAST,
    CardinalDirection.WEST: CardinalDirection.NORTH,
}


class Tile(Enum):
    """A single square of the contraption."""

    SLASH = "/"
    BACKSLASH = "\\"
    DASH = "-"
    PIPE = "|"
    EMPTY = "."

    @classmethod
    def from_char(cls, char: str) -> Tile:
        """The tile drawn as ``char``."""
        try:
            return cls(char)
        except ValueError:
            raise GridParseError(f"Illegal location character {char}") from None

    def perpendicular(self, direction: CardinalDirection) -> bool:
        """Whether a beam travelling ``direction`` hits this splitter side-on."""
        if self is Tile.DASH:
            return direction in (CardinalDirection.NORTH, CardinalDirection.SOUTH)
        if self is Tile.PIPE:
            return direction in (CardinalDirection.EAST, CardinalDirection.WEST)
        return False

    def outgoing(self, direction: CardinalDirection) -> tuple[CardinalDirection, ...]:
        """The directions a beam leaves this tile in when it arrives travelling ``direction``."""
        if self is Tile.SLASH:
            return (direction.rotate_slash(),)
        if self is Tile.BACKSLASH:
            return (direction.rotate_backslash(),)
        if self.perpendicular(direction):
            return direction.split()
        return (direction,)

    def __str__(self) -> str:
        return self.value


@dataclass
class Grid:
    """A grid of tiles and the directions beams have entered each tile from."""

    tiles: tuple[tuple[Tile, ...], ...]
    entered_from: dict[Position, set[CardinalDirection]] = field(
        default_factory=dict, compare=False
    )

    @classmethod
    def parse(cls, text: str) -> Grid:
        """Parse a grid; its width is the length of the first line."""
        lines = text.splitlines()
        if not lines:
            raise GridParseError("Tried to parse a pattern with no lines")
        width = len(lines[0])
        tiles = [Tile.from_char(char) for line in lines for char in line]
        if width == 0 or len(tiles) % width:
            raise GridParseError(f"{len(tiles)} locations do not fill rows of width {width}")
        rows = tuple(
            tuple(tiles[start : start + width]) for start in range(0, len(tiles), width)
        )
        return cls(rows)

    def __str__(self) -> str:
        return "".join("".join(map(str, row)) + "\n" for row in self.tiles)

    @property
    def nrows(self) -> int:
        return len(self.tiles)

    @property
    def ncols(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    def _contains(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.nrows and 0 <= col < self.ncols

    def shine_beam(self, position: Position, direction: CardinalDirection) -> None:
        """Send a beam into ``position`` travelling ``direction`` and mark every tile it crosses."""
        if not self._contains(position):
            raise IndexError(f"position {position} is outside the grid")
        pending = [(position, direction)]
        while pending:
            pos, heading = pending.pop()
            entered = self.entered_from.setdefault(pos, set())
            origin = heading.reverse()
            if origin in entered:
                continue
            entered.add(origin)
            tile = self.tiles[pos[0]][pos[1]]
            for new_heading in tile.outgoing(heading):
                following = new_heading.step(pos)
                if self._contains(following):
                    pending.append((following, new_heading))

    def num_energized(self) -> int:
        """Number of tiles at least one beam has passed through."""
        return sum(1 for entered in self.entered_from.values() if entered)

    def beam_energized(self, position: Position, direction: CardinalDirection) -> int:
        """Tiles energized by a single beam on a fresh copy of this grid."""
        fresh = Grid(self.tiles)
        fresh.shine_beam(position, direction)
        return fresh.num_energized()

    def maximize_energized(self) -> int:
        """The most tiles any beam entering from an edge can energize."""
        nrows, ncols = self.nrows, self.ncols
        starts = [
            *(((row, 0), CardinalDirection.EAST) for row in range(nrows)),
            *(((row, ncols - 1), CardinalDirection.WEST) for row in range(nrows)),
            *(((0, col), CardinalDirection.SOUTH) for col in range(ncols)),
            *(((nrows - 1, col), CardinalDirection.NORTH) for col in range(ncols)),
        ]
        return max(
            (self.beam_energized(position, direction) for position, direction in starts),
            default=0,
        )


def main(argv: list[str] | None = None) -> int:
    """Print the number of energized tiles."""
    parser = argparse.ArgumentParser(description="Count tiles energized by light beams.")
    parser.add_argument("input", nargs="?", help="grid file (standard input if omitted)")
    parser.add_argument(
        "--maximize",
        action="store_true",
        help="try every edge entry point and print the best result",
    )
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        grid = Grid.parse(text)
    except GridParseError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if args.maximize:
        result = grid.maximize_energized()
    else:
        grid.shine_beam((0, 0), CardinalDirection.EAST)
        result = grid.num_energized()
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())