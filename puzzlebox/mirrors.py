"""Lava island mirrors: find lines of reflection in ash-and-rock patterns."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path


class LavaIslandMapError(ValueError):
    """Raised when a pattern cannot be parsed."""


class Location(Enum):
    """A single square of a pattern."""

    ASH = "."
    ROCK = "#"

    @classmethod
    def from_char(cls, char: str) -> Location:
        """The location drawn as ``char``."""
        try:
            return cls(char)
        except ValueError:
            raise LavaIslandMapError(f"Illegal location character {char}") from None

    def smudged(self) -> Location:
        """The other kind of location."""
        return Location.ROCK if self is Location.ASH else Location.ASH

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Reflection:
    """A line of reflection; ``index`` lanes lie before it."""

    horizontal: bool
    index: int

    def value(self) -> int:
        """Columns left of a vertical line, or 100 times the rows above a horizontal one."""
        return 100 * self.index if self.horizontal else self.index


def _reflection_points(lanes: list[tuple[Location, ...]]) -> list[int]:
    return [
        n
        for n in range(1, len(lanes))
        if all(a == b for a, b in zip(reversed(lanes[:n]), lanes[n:]))
    ]


@dataclass(frozen=True)
class Pattern:
    """A rectangular grid of ash and rock."""

    rows: tuple[tuple[Location, ...], ...]

    @classmethod
    def parse(cls, text: str) -> Pattern:
        """Parse a pattern; its width is the length of the first line."""
        lines = text.splitlines()
        if not lines:
            raise LavaIslandMapError("Tried to parse a pattern with no lines")
        width = len(lines[0])
        locations = [Location.from_char(char) for line in lines for char in line]
        if width == 0 or len(locations) % width:
            raise LavaIslandMapError(
                f"{len(locations)} locations do not fill rows of width {width}"
            )
        rows = tuple(
            tuple(locations[start : start + width])
            for start in range(0, len(locations), width)
        )
        return cls(rows)

    def __str__(self) -> str:
        return "".join("".join(map(str, row)) + "\n" for row in self.rows)

    def _columns(self) -> list[tuple[Location, ...]]:
        return list(zip(*self.rows))

    def _reflections(self) -> list[Reflection]:
        vertical = [Reflection(False, n) for n in _reflection_points(self._columns())]
        horizontal = [Reflection(True, n) for n in _reflection_points(list(self.rows))]
        return vertical + horizontal

    def reflection_value(self) -> int | None:
        """Value of the first line of reflection, checking vertical lines first."""
        reflections = self._reflections()
        return reflections[0].value() if reflections else None

    def reflection_values(self) -> frozenset[Reflection]:
        """Every line of reflection in the pattern."""
        return frozenset(self._reflections())

    def _smudged_at(self, row: int, col: int) -> Pattern:
        target = self.rows[row]
        new_row = (*target[:col], target[col].smudged(), *target[col + 1 :])
        return replace(self, rows=(*self.rows[:row], new_row, *self.rows[row + 1 :]))

    def reflection_value_with_smudges(self) -> int | None:
        """Value of the first new line of reflection produced by fixing one smudge."""
        original = self.reflection_values()
        for row, cells in enumerate(self.rows):
            for col in range(len(cells)):
                for reflection in self._smudged_at(row, col)._reflections():
                    if reflection not in original:
                        return reflection.value()
        return None


@dataclass(frozen=True)
class LavaIslandMap:
    """Patterns separated by blank lines."""

    patterns: tuple[Pattern, ...]

    @classmethod
    def parse(cls, text: str) -> LavaIslandMap:
        """Parse every pattern in ``text``."""
        return cls(tuple(Pattern.parse(block) for block in text.split("\n\n")))

    def reflection_positions(self) -> int:
        """Sum of the reflection values of all patterns that have one."""
        return sum(
            value
            for value in (pattern.reflection_value() for pattern in self.patterns)
            if value is not None
        )

    def smudged_reflection_positions(self) -> int:
        """Sum of the reflection values found after fixing each pattern's smudge."""
        return sum(
            value
            for value in (pattern.reflection_value_with_smudges() for pattern in self.patterns)
            if value is not None
        )


def main(argv: list[str] | None = None) -> int:
    """Print the summary of reflection lines."""
    parser = argparse.ArgumentParser(description="Summarise lines of reflection.")
    parser.add_argument("input", nargs="?", help="patterns file (standard input if omitted)")
    parser.add_argument(
        "--smudges",
        action="store_true",
        help="fix exactly one smudge in each pattern first",
    )
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        island = LavaIslandMap.parse(text)
    except LavaIslandMapError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if args.smudges:
        result = island.smudged_reflection_positions()
    else:
        result = island.reflection_positions()
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())