"""Galaxy map: expand empty rows and columns and sum pairwise distances."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, replace
from itertools import combinations
from pathlib import Path


@dataclass(frozen=True)
class Galaxy:
    """A galaxy's row and column."""

    row: int
    col: int

    def manhattan_distance(self, other: Galaxy) -> int:
        """Grid distance to ``other``."""
        return abs(self.row - other.row) + abs(self.col - other.col)


def _coordinate(galaxy: Galaxy, axis: str) -> int:
    return galaxy.row if axis == "row" else galaxy.col


def _expand(galaxies: list[Galaxy], axis: str, expansion_rate: int) -> list[Galaxy]:
    expanded = []
    offset = 0
    previous: int | None = None
    for galaxy in sorted(galaxies, key=lambda g: _coordinate(g, axis)):
        value = _coordinate(galaxy, axis)
        if previous is not None and value - previous > 1:
            offset += (value - previous - 1) * (expansion_rate - 1)
        previous = value
        expanded.append(replace(galaxy, **{axis: value + offset}))
    return expanded


@dataclass
class GalaxyMap:
    """The galaxies found in an image."""

    galaxies: list[Galaxy]

    @classmethod
    def parse(cls, text: str) -> GalaxyMap:
        """Collect every ``#`` in ``text`` as a galaxy, without expansion."""
        return cls(
            [
                Galaxy(row, col)
                for row, line in enumerate(text.splitlines())
                for col, char in enumerate(line)
                if char == "#"
            ]
        )

    @classmethod
    def parse_and_adjust(cls, text: str, expansion_rate: int = 2) -> GalaxyMap:
        """Parse ``text`` and widen each empty row and column ``expansion_rate`` times."""
        if expansion_rate < 1:
            raise ValueError("expansion rate must be at least 1")
        galaxies = cls.parse(text).galaxies
        galaxies = _expand(galaxies, "row", expansion_rate)
        galaxies = _expand(galaxies, "col", expansion_rate)
        return cls(galaxies)

    def pairwise_length_sum(self) -> int:
        """Sum of distances over every pair of galaxies."""
        return sum(p.manhattan_distance(q) for p, q in combinations(self.galaxies, 2))


def main(argv: list[str] | None = None) -> int:
    """Print the sum of pairwise distances in an expanded galaxy map."""
    parser = argparse.ArgumentParser(description="Sum of distances between galaxies.")
    parser.add_argument("input", nargs="?", help="map file (standard input if omitted)")
    parser.add_argument(
        "--expansion-rate",
        type=int,
        default=2,
        help="how many times each empty row and column is widened (default 2)",
    )
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        galaxy_map = GalaxyMap.parse_and_adjust(text, args.expansion_rate)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Result: {galaxy_map.pairwise_length_sum()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())