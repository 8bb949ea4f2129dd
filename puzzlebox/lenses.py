"""Lens library: hash initialization steps and arrange lenses in their boxes."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


def holiday_hash(data: str | bytes) -> int:
    """The one-byte hash of ``data``; text is hashed as its UTF-8 bytes."""
    if isinstance(data, str):
        data = data.encode()
    value = 0
    for byte in data:
        value = (value + byte) * 17 % 256
    return value


class ParseStepError(ValueError):
    """Raised when a step cannot be parsed."""


class Operation(Enum):
    """What a step does to the box its label hashes to."""

    DELETE = "-"
    INSERT = "="


@dataclass(frozen=True)
class Step:
    """A single instruction: remove a lens, or insert one with a focal length."""

    label: str
    operation: Operation
    focal_length: int | None = None

    @classmethod
    def parse(cls, text: str) -> Step:
        """Parse ``label=N`` (N from 1 to 9) or ``label-``."""
        data = text.encode()
        if len(data) >= 2 and data[-2] == ord("="):
            focal = data[-1] - ord("0")
            if not 1 <= focal <= 9:
                raise ParseStepError(f"Illegal focal length: {chr(data[-1])!r}")
            return cls(data[:-2].decode(), Operation.INSERT, focal)
        if data.endswith(b"-"):
            return cls(data[:-1].decode(), Operation.DELETE)
        raise ParseStepError(f"Invalid step representation: {text!r}")


@dataclass(frozen=True)
class InitializationSequence:
    """The comma-separated steps of an initialization sequence."""

    raw_steps: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> InitializationSequence:
        """Split ``text``, with surrounding whitespace removed, on commas."""
        return cls(tuple(text.strip().split(",")))

    def sum_of_hashes(self) -> int:
        """Sum of the hashes of every raw step."""
        return sum(holiday_hash(step) for step in self.raw_steps)

    def steps(self) -> list[Step]:
        """The parsed steps."""
        return [Step.parse(step) for step in self.raw_steps]

    def focusing_power(self) -> int:
        """Total focusing power of the lenses after every step is applied."""
        boxes: dict[int, dict[str, int]] = {}
        for step in self.steps():
            lenses = boxes.setdefault(holiday_hash(step.label), {})
            if step.operation is Operation.DELETE:
                lenses.pop(step.label, None)
            else:
                lenses[step.label] = step.focal_length
        return sum(
            (box + 1) * slot * focal
            for box, lenses in boxes.items()
            for slot, focal in enumerate(lenses.values(), start=1)
        )


def main(argv: list[str] | None = None) -> int:
    """Print the sum of step hashes, or the focusing power."""
    parser = argparse.ArgumentParser(description="Hash and apply initialization steps.")
    parser.add_argument("input", nargs="?", help="sequence file (standard input if omitted)")
    parser.add_argument(
        "--focusing-power",
        action="store_true",
        help="apply the steps and print the focusing power",
    )
    args = parser.parse_args(argv)
    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    sequence = InitializationSequence.parse(text)
    try:
        result = sequence.focusing_power() if args.focusing_power else sequence.sum_of_hashes()
    except ParseStepError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())