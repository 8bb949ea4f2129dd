"""Pipe maze: follow the loop through the start tile and measure the area it encloses."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path


class TooManyBitsError(ValueError):
    """Raised when a bit pattern does not name exactly one connection."""

    def __init__(self, bits: int) -> None:
        super().__init__(f"Too many bits for a single connection: {bits:b}")
        self.bits = bits


class PipeMapError(Exception):
    """Base class for errors raised while parsing or walking a pipe map."""


class IllegalCharacterError(PipeMapError):
    """A character outside the set ``|-LJ7F.S`` was found."""

    def __init__(self, line: str, row_number: int, column: int) -> None:
        super().__init__(f"Illegal character in pipe map on row {row_number}")
        self.line = line
        self.row_number = row_number
        self.column = column


class NoStartSymbolError(PipeMapError):
    """The map holds no ``S`` tile."""

    def __init__(self) -> None:
        super().__init__("No start symbol was found in the pipe map")


class IllegalPosError(PipeMapError):
    """A position outside the map was accessed."""

    def __init__(self, pos: Pos) -> None:
        super().__init__(f"Attempt to access an illegal `Pos` {pos} in `PipeMap`")
        self.pos = pos


class NotTwoOptionsError(PipeMapError):
    """The start tile does not connect to exactly two neighbours."""

    def __init__(self, options: list[Connection]) -> None:
        names = ", ".join(option.name for option in options)
        super().__init__(f"Not two options from start: [{names}]")
        self.options = options


class Connection(IntEnum):
    """A direction out of a tile, as a single bit flag."""

    NORTH = 0b1000
    EAST = 0b0100
    SOUTH = 0b0010
    WEST = 0b0001

    def reverse(self) -> Connection:
        """The opposite direction."""
        return _REVERSE[self]

    @classmethod
    def from_bits(cls, bits: int) -> Connection:
        """The connection named by ``bits``, which must hold a single set bit."""
        try:
            return cls(bits)
        except ValueError:
            raise TooManyBitsError(bits) from None


_REVERSE = {
    Connection.NORTH: Connection.SOUTH,
    Connection.EAST: Connection.WEST,
    Connection.SOUTH: Connection.NORTH,
    Connection.WEST: Connection.EAST,
}


class CellType(Enum):
    """The kind of tile found at a map position."""

    NS_PIPE = "|"
    EW_PIPE = "-"
    NE_BEND = "L"
    NW_BEND = "J"
    SW_BEND = "7"
    SE_BEND = "F"
    GROUND = "."
    START = "S"

    def connections(self) -> int:
        """All directions reachable from this tile, as bit flags."""
        return _CONNECTIONS[self]

    def connection_from(self, incoming: Connection) -> Connection:
        """The way out of this tile when entered travelling ``incoming``."""
        if self is CellType.START:
            raise ValueError("connection_from() does not work on the start tile")
        return Connection.from_bits(self.connections() & ~int(incoming.reverse()) & 0b1111)


_CONNECTIONS = {
    CellType.NS_PIPE: Connection.NORTH | Connection.SOUTH,
    CellType.EW_PIPE: Connection.WEST | Connection.EAST,
    CellType.NE_BEND: Connection.NORTH | Connection.EAST,
    CellType.NW_BEND: Connection.NORTH | Connection.WEST,
    CellType.SW_BEND: Connection.SOUTH | Connection.WEST,
    CellType.SE_BEND: Connection.SOUTH | Connection.EAST,
    CellType.GROUND: 0,
    CellType.START: 0b1111,
}


@dataclass(frozen=True)
class Pos:
    """A row and column in the map."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    def step(self, direction: Connection) -> Pos:
        """The neighbouring position in ``direction``."""
        row, col = self.row, self.col
        if direction is Connection.NORTH:
            row -= 1
        elif direction is Connection.EAST:
            col += 1
        elif direction is Connection.SOUTH:
            row += 1
        else:
            col -= 1
        if row < 0 or col < 0:
            raise IllegalPosError(self)
        return Pos(row, col)


@dataclass(frozen=True)
class Cell:
    """A tile together with its position."""

    cell_type: CellType
    pos: Pos


@dataclass
class PipeMap:
    """A parsed pipe map and the position of its start tile."""

    entries: list[list[Cell]]
    start: Pos

    @classmethod
    def parse(cls, text: str) -> PipeMap:
        """Parse a map drawn with the characters ``|-LJ7F.S``."""
        start: Pos | None = None
        entries: list[list[Cell]] = []
        for row_number, line in enumerate(text.splitlines()):
            row: list[Cell] = []
            for col_number, char in enumerate(line):
                if char == "S":
                    start = Pos(row_number, col_number)
                try:
                    cell_type = CellType(char)
                except ValueError:
                    raise IllegalCharacterError(line, row_number, col_number) from None
                row.append(Cell(cell_type, Pos(row_number, col_number)))
            entries.append(row)
        if start is None:
            raise NoStartSymbolError()
        return cls(entries, start)

    def get(self, pos: Pos) -> Cell:
        """The cell at ``pos``."""
        if 0 <= pos.row < len(self.entries):
            row = self.entries[pos.row]
            if 0 <= pos.col < len(row):
                return row[pos.col]
        raise IllegalPosError(pos)

    def move_to(self, cell: Cell, direction: Connection) -> Cell:
        """The cell next to ``cell`` in ``direction``."""
        return self.get(cell.pos.step(direction))

    def start_cell(self) -> Cell:
        """The cell holding the start tile."""
        return self.get(self.start)

    def starting_options(self) -> tuple[Cell, list[Connection]]:
        """The start cell and the two directions the loop leaves it by."""
        start = self.start_cell()
        options = []
        for direction in Connection:
            try:
                self.move_to(start, direction).cell_type.connection_from(direction)
            except (PipeMapError, TooManyBitsError):
                continue
            options.append(direction)
        if len(options) != 2:
            raise NotTwoOptionsError(options)
        return start, options

    def path_cells(self) -> Iterator[Cell]:
        """Cells along the loop, ending with the start cell."""
        start, options = self.starting_options()
        return self._walk(start, options[0])

    def _walk(self, cell: Cell, direction: Connection) -> Iterator[Cell]:
        while True:
            try:
                next_cell = self.move_to(cell, direction)
            except PipeMapError:
                return
            if next_cell.cell_type is CellType.START:
                yield next_cell
                return
            try:
                direction = next_cell.cell_type.connection_from(direction)
            except TooManyBitsError:
                return
            cell = next_cell
            yield next_cell

    def enclosed_area(self) -> int:
        """Number of tiles strictly inside the loop."""
        cells = self.path_cells()
        first = next(cells, None)
        if first is None:
            raise NoStartSymbolError()
        previous = first
        num_cells = 0
        area_sum = 0
        for cell in (*cells, first):
            num_cells += 1
            area_sum += previous.pos.row * cell.pos.col - previous.pos.col * cell.pos.row
            previous = cell
        return (abs(area_sum) - num_cells) // 2 + 1


def main(argv: list[str] | None = None) -> int:
    """Print the area enclosed by the loop in a pipe map."""
    parser = argparse.ArgumentParser(description="Area enclosed by the pipe loop.")
    parser.add_argument("input", nargs="?", help="map file (standard input if omitted)")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        result = PipeMap.parse(text).enclosed_area()
    except PipeMapError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())