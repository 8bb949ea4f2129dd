# puzzlebox

A small collection of solvers for text-based grid and sequence puzzles.
Each puzzle lives in its own module, can be used from Python, and has a
command that reads a puzzle input and prints the answer.

| Module                | What it solves                                                        |
|-----------------------|-----------------------------------------------------------------------|
| `puzzlebox.pipes`     | Follows the pipe loop through the start tile `S` and counts the tiles it encloses |
| `puzzlebox.galaxies`  | Widens empty rows and columns and sums the distances between all pairs of galaxies |
| `puzzlebox.springs`   | Counts the arrangements of broken springs that fit each condition record |
| `puzzlebox.mirrors`   | Finds lines of reflection in ash-and-rock patterns, plainly or after fixing one smudge |
| `puzzlebox.dish`      | Tilts a platform of rolling rocks and measures the load on its north side |
| `puzzlebox.lenses`    | Hashes initialization steps and computes the focusing power of the lens boxes |
| `puzzlebox.beams`     | Traces light beams through mirrors and splitters and counts energized tiles |

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Each command takes the path of an input file, or reads standard input when
no path is given, and prints `Result: <answer>`. Input that cannot be parsed
is reported as `error: ...` on standard error with exit status 1.

```
puzzlebox-pipes input.txt
puzzlebox-galaxies input.txt [--expansion-rate N]
puzzlebox-springs input.txt [--repeats N]
puzzlebox-mirrors input.txt [--smudges]
puzzlebox-dish input.txt [--cycles N]
puzzlebox-lenses input.txt [--focusing-power]
puzzlebox-beams input.txt [--maximize]
```

- `puzzlebox-galaxies`: `--expansion-rate` is how many times each empty row
  and column counts (default 2).
- `puzzlebox-springs`: `--repeats` unfolds each record that many times
  (default 1).
- `puzzlebox-mirrors`: `--smudges` fixes exactly one smudge in each pattern
  before looking for the new line of reflection.
- `puzzlebox-dish`: without options the platform is tilted north once;
  `--cycles N` runs N north-west-south-east spin cycles instead.
- `puzzlebox-lenses`: prints the sum of the step hashes, or with
  `--focusing-power` applies the steps and prints the focusing power.
- `puzzlebox-beams`: shines a beam into the top-left tile heading east, or
  with `--maximize` tries every edge entry point and prints the best count.

## Python usage

Each module parses puzzle text with a `parse` class method and exposes the
calculations as methods on the parsed object.

```python
from pathlib import Path

from puzzlebox.pipes import PipeMap
from puzzlebox.galaxies import GalaxyMap
from puzzlebox.springs import ConditionRecords
from puzzlebox.mirrors import LavaIslandMap
from puzzlebox.dish import CardinalDirection, Platform
from puzzlebox.lenses import InitializationSequence, holiday_hash
from puzzlebox.beams import CardinalDirection as BeamDirection, Grid

text = Path("input.txt").read_text()

# Tiles enclosed by the pipe loop
PipeMap.parse(text).enclosed_area()

# Galaxy distances, with each empty row or column counting a million times
GalaxyMap.parse_and_adjust(text, expansion_rate=1_000_000).pairwise_length_sum()

# Spring arrangements, with each record unfolded five times
ConditionRecords.parse(text, repeats=5).num_arrangements()

# Reflection summaries, plain and after fixing one smudge
island = LavaIslandMap.parse(text)
island.reflection_positions()
island.smudged_reflection_positions()

# Load after tilting north, and after a billion spin cycles
platform = Platform.parse(text)
platform.total_load(CardinalDirection.NORTH)
platform.total_load_after_cycles(1_000_000_000)

# Step hashes and total focusing power
holiday_hash("HASH")  # 52
sequence = InitializationSequence.parse(text)
sequence.sum_of_hashes()
sequence.focusing_power()

# Energized tiles from the top-left corner, and the best entry point
grid = Grid.parse(text)
grid.beam_energized((0, 0), BeamDirection.EAST)
grid.maximize_energized()
```

## Errors

Malformed input raises an exception specific to the puzzle:
`PipeMapError` (with subclasses `IllegalCharacterError`,
`NoStartSymbolError`, `IllegalPosError` and `NotTwoOptionsError`),
`ConditionRecordsError`, `LavaIslandMapError`, `PlatformError`,
`ParseStepError` and `GridParseError`. All but `PipeMapError` are
subclasses of `ValueError`.

## Limitations

No puzzle inputs are included; every command and parser works on text you
supply.