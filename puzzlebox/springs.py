"""Spring condition records: count the arrangements that fit each damaged record."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_COUNT = re.compile(r"\+?[0-9]+")


class ConditionRecordsError(ValueError):
    """Raised when a condition record cannot be parsed."""


class Status(Enum):
    """The known or unknown state of a single spring."""

    BROKEN = "#"
    WORKING = "."
    UNKNOWN = "?"

    @classmethod
    def from_char(cls, char: str) -> Status:
        """The status drawn as ``char``."""
        try:
            return cls(char)
        except ValueError:
            raise ConditionRecordsError(f"Illegal character in pattern: {char!r}") from None


def _parse_count(text: str) -> int:
    if not _COUNT.fullmatch(text):
        raise ConditionRecordsError(f"Illegal integer count: {text!r}")
    return int(text)


@dataclass(frozen=True)
class ConditionRecord:
    """A row of springs and the sizes of its contiguous groups of broken springs."""

    pattern: tuple[Status, ...]
    counts: tuple[int, ...]

    @classmethod
    def parse(cls, line: str, repeats: int = 1) -> ConditionRecord:
        """Parse ``pattern counts``, unfolding the record ``repeats`` times.

        Copies of the pattern are joined by an unknown spring; the counts are
        simply repeated.
        """
        if repeats < 1:
            raise ValueError("repeats must be at least 1")
        pattern_text, sep, counts_text = line.partition(" ")
        if not sep:
            raise ConditionRecordsError(f"No space in one of the rows: {line!r}")
        pattern = [Status.from_char(char) for char in pattern_text]
        counts = [_parse_count(part) for part in counts_text.split(",")]
        unfolded: list[Status] = []
        for copy in range(repeats):
            if copy:
                unfolded.append(Status.UNKNOWN)
            unfolded.extend(pattern)
        return cls(tuple(unfolded), tuple(counts * repeats))

    def _expected(self, counts_pos: int) -> int:
        return self.counts[counts_pos] if counts_pos < len(self.counts) else 0

    def num_arrangements(self) -> int:
        """Number of ways the unknown springs can be filled in to match the counts."""
        last = len(self.counts) - 1
        max_broken = max(self.counts, default=0)
        states = [
            (counts_pos, broken)
            for counts_pos in range(len(self.counts) + 1)
            for broken in range(max_broken + 1)
        ]
        # ways[(counts_pos, broken)] for the suffix of the pattern starting here.
        ways = {
            (counts_pos, broken): int(
                self._expected(counts_pos) == broken and counts_pos >= last
            )
            for counts_pos, broken in states
        }
        for status in reversed(self.pattern):
            current: dict[tuple[int, int], int] = {}
            for counts_pos, broken in states:
                expected = self._expected(counts_pos)
                total = 0
                if status is not Status.WORKING and broken + 1 <= expected:
                    total += ways[(counts_pos, broken + 1)]
                if status is not Status.BROKEN and not (broken > 0 and broken != expected):
                    total += ways[(counts_pos + (broken > 0), 0)]
                current[(counts_pos, broken)] = total
            ways = current
        return ways[(0, 0)]


@dataclass(frozen=True)
class ConditionRecords:
    """All the condition records from an input."""

    records: tuple[ConditionRecord, ...]

    @classmethod
    def parse(cls, text: str, repeats: int = 1) -> ConditionRecords:
        """Parse one record per line, each unfolded ``repeats`` times."""
        return cls(tuple(ConditionRecord.parse(line, repeats) for line in text.splitlines()))

    def num_arrangements(self) -> int:
        """Sum of the arrangement counts of every record."""
        return sum(record.num_arrangements() for record in self.records)


def main(argv: list[str] | None = None) -> int:
    """Print the total number of spring arrangements."""
    parser = argparse.ArgumentParser(description="Count spring arrangements.")
    parser.add_argument("input", nargs="?", help="records file (standard input if omitted)")
    parser.add_argument(
        "--repeats",
        type=int,
        default=1,
        help="how many times each record is unfolded (default 1)",
    )
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        records = ConditionRecords.parse(text, args.repeats)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Result: {records.num_arrangements()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())