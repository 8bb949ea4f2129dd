"""Parabolic reflector dish: roll round rocks across a platform and weigh the load."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class PlatformError(ValueError):
    """Raised when a platform cannot be parsed."""


class Location(Enum):
    """A single square of the platform."""

    ROUND = "O"
    CUBE = "#"
    EMPTY = "."

    @classmethod
    def from_char(cls, char: str) -> Location:
        """The location drawn as ``char``."""
        try:
            return cls(char)
        except ValueError:
            raise PlatformError(f"Illegal location character {char}") from None

    def __str__(self) -> str:
        return self.value


class CardinalDirection(Enum):
    """The direction the platform is tilted towards."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


Row = tuple[Location, ...]


def _roll_lane_forwards(lane: Row) -> Row:
    """Move every round rock towards the start of ``lane``, stopping at cube rocks."""
    rolled: list[Location] = []
    segment: list[Location] = []

    def flush() -> None:
        rounds = sum(1 for location in segment if location is Location.ROUND)
        rolled.extend([Location.ROUND] * rounds)
        rolled.extend([Location.EMPTY] * (len(segment) - rounds))
        segment.clear()

    for location in lane:
        if location is Location.CUBE:
            flush()
            rolled.append(location)
        else:
            segment.append(location)
    flush()
    return tuple(rolled)


def _roll_lane(lane: Row, forwards: bool) -> Row:
    if forwards:
        return _roll_lane_forwards(lane)
    return _roll_lane_forwards(lane[::-1])[::-1]


def _transpose(rows: tuple[Row, ...]) -> tuple[Row, ...]:
    return tuple(zip(*rows))


_CYCLE = (
    CardinalDirection.NORTH,
    CardinalDirection.WEST,
    CardinalDirection.SOUTH,
    CardinalDirection.EAST,
)


@dataclass(frozen=True)
class Platform:
    """A rectangular grid of round rocks, cube rocks and empty space."""

    rows: tuple[Row, ...]

    @classmethod
    def parse(cls, text: str) -> Platform:
        """Parse a platform; its width is the length of the first line."""
        lines = text.splitlines()
        if not lines:
            raise PlatformError("Tried to parse a pattern with no lines")
        width = len(lines[0])
        locations = [Location.from_char(char) for line in lines for char in line]
        if width == 0 or len(locations) % width:
            raise PlatformError(
                f"{len(locations)} locations do not fill rows of width {width}"
            )
        rows = tuple(
            tuple(locations[start : start + width])
            for start in range(0, len(locations), width)
        )
        return cls(rows)

    def __str__(self) -> str:
        return "".join("".join(map(str, row)) + "\n" for row in self.rows)

    def roll(self, direction: CardinalDirection) -> Platform:
        """The platform after every round rock has rolled as far as it can in ``direction``."""
        if direction in (CardinalDirection.NORTH, CardinalDirection.SOUTH):
            forwards = direction is CardinalDirection.NORTH
            columns = tuple(_roll_lane(col, forwards) for col in _transpose(self.rows))
            return Platform(_transpose(columns))
        forwards = direction is CardinalDirection.WEST
        return Platform(tuple(_roll_lane(row, forwards) for row in self.rows))

    def compute_load(self) -> int:
        """Total load on the north support beams."""
        height = len(self.rows)
        return sum(
            (height - index) * sum(1 for location in row if location is Location.ROUND)
            for index, row in enumerate(self.rows)
        )

    def total_load(self, direction: CardinalDirection) -> int:
        """Load on the north beams after tilting the platform once towards ``direction``."""
        return self.roll(direction).compute_load()

    def _spin_cycle(self) -> Platform:
        platform = self
        for direction in _CYCLE:
            platform = platform.roll(direction)
        return platform

    def total_load_after_cycles(self, num_cycles: int) -> int:
        """Load on the north beams after ``num_cycles`` north-west-south-east spin cycles."""
        if num_cycles < 0:
            raise ValueError("number of cycles must not be negative")
        seen: dict[Platform, int] = {self: num_cycles}
        platform = self
        remaining = num_cycles
        while remaining:
            platform = platform._spin_cycle()
            remaining -= 1
            at_loop_start = seen.get(platform)
            if at_loop_start is not None:
                seen.clear()
                remaining %= at_loop_start - remaining
            else:
                seen[platform] = remaining
        return platform.compute_load()


def main(argv: list[str] | None = None) -> int:
    """Print the north load after tilting north, or after a number of spin cycles."""
    parser = argparse.ArgumentParser(description="Load on the north support beams.")
    parser.add_argument("input", nargs="?", help="platform file (standard input if omitted)")
    parser.add_argument(
        "--cycles",
        type=int,
        default=None,
        help="run this many spin cycles instead of a single tilt north",
    )
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        platform = Platform.parse(text)
        if args.cycles is None:
            result = platform.total_load(CardinalDirection.NORTH)
        else:
            result = platform.total_load_after_cycles(args.cycles)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())