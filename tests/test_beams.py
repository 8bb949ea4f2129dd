import pytest

from puzzlebox.beams import CardinalDirection, Grid, GridParseError, Tile, main

SAMPLE = r""".|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|....
"""


def test_sample_single_beam():
    grid = Grid.parse(SAMPLE)
    grid.shine_beam((0, 0), CardinalDirection.EAST)
    assert grid.num_energized() == 46


def test_sample_maximize():
    assert Grid.parse(SAMPLE).maximize_energized() == 51


def test_beam_energized_does_not_change_grid():
    grid = Grid.parse(SAMPLE)
    assert grid.beam_energized((0, 0), CardinalDirection.EAST) == 46
    assert grid.num_energized() == 0


def test_empty_row():
    grid = Grid.parse("...\n")
    grid.shine_beam((0, 2), CardinalDirection.WEST)
    assert grid.num_energized() == 3


def test_splitter_perpendicular():
    grid = Grid.parse("...\n.-.\n...\n")
    grid.shine_beam((0, 1), CardinalDirection.SOUTH)
    assert grid.num_energized() == 4


def test_splitter_parallel_passes_through():
    grid = Grid.parse("...\n.-.\n...\n")
    grid.shine_beam((1, 0), CardinalDirection.EAST)
    assert grid.num_energized() == 3


def test_slash_mirror_leaves_grid():
    grid = Grid.parse("/.\n..\n")
    grid.shine_beam((0, 0), CardinalDirection.EAST)
    assert grid.num_energized() == 1


def test_backslash_mirror_turns():
    grid = Grid.parse("\\.\n..\n")
    grid.shine_beam((0, 0), CardinalDirection.SOUTH)
    assert grid.num_energized() == 2


def test_out_of_range_start():
    with pytest.raises(IndexError):
        Grid.parse("..\n").shine_beam((3, 0), CardinalDirection.EAST)


def test_str_round_trip():
    assert str(Grid.parse(SAMPLE)) == SAMPLE


def test_tile_from_char():
    assert Tile.from_char("\\") is Tile.BACKSLASH
    with pytest.raises(GridParseError):
        Tile.from_char("O")


def test_direction_involutions():
    assert CardinalDirection.NORTH.reverse() is CardinalDirection.SOUTH
    assert CardinalDirection.EAST.reverse() is CardinalDirection.WEST
    for direction in CardinalDirection:
        assert CardinalDirection.reverse(CardinalDirection.reverse(direction)) is direction
        assert CardinalDirection.rotate_slash(CardinalDirection.rotate_slash(direction)) is direction
        assert (
            CardinalDirection.rotate_backslash(CardinalDirection.rotate_backslash(direction))
            is direction
        )


def test_rotations_and_split():
    assert CardinalDirection.NORTH.rotate_slash() is CardinalDirection.EAST
    assert CardinalDirection.EAST.rotate_backslash() is CardinalDirection.SOUTH
    assert CardinalDirection.WEST.split() == (CardinalDirection.NORTH, CardinalDirection.SOUTH)
    assert CardinalDirection.SOUTH.split() == (CardinalDirection.EAST, CardinalDirection.WEST)


def test_perpendicular():
    assert Tile.DASH.perpendicular(CardinalDirection.NORTH)
    assert not Tile.DASH.perpendicular(CardinalDirection.EAST)
    assert Tile.PIPE.perpendicular(CardinalDirection.WEST)
    assert not Tile.EMPTY.perpendicular(CardinalDirection.WEST)


def test_main(tmp_path, capsys):
    path = tmp_path / "grid.txt"
    path.write_text(SAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Result: 46\n"
    assert main([str(path), "--maximize"]) == 0
    assert capsys.readouterr().out == "Result: 51\n"