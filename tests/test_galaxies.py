import pytest

from puzzlebox.galaxies import Galaxy, GalaxyMap, main

TEST_INPUT = """\
...#......
.......#..
#.........
..........
......#...
.#........
.........#
..........
.......#..
#...#.....
"""


def test_part_one_test_input():
    assert GalaxyMap.parse_and_adjust(TEST_INPUT).pairwise_length_sum() == 374


def test_part_two_test_input():
    galaxy_map = GalaxyMap.parse_and_adjust(TEST_INPUT, 1_000_000)
    assert galaxy_map.pairwise_length_sum() == 82_000_210


@pytest.mark.parametrize(("rate", "expected"), [(10, 1030), (100, 8410)])
def test_other_expansion_rates(rate, expected):
    assert GalaxyMap.parse_and_adjust(TEST_INPUT, rate).pairwise_length_sum() == expected


def test_parse_positions():
    galaxy_map = GalaxyMap.parse(TEST_INPUT)
    assert len(galaxy_map.galaxies) == 9
    assert galaxy_map.galaxies[0] == Galaxy(0, 3)
    assert galaxy_map.galaxies[-1] == Galaxy(9, 4)


def test_rate_one_leaves_positions():
    plain = GalaxyMap.parse(TEST_INPUT)
    adjusted = GalaxyMap.parse_and_adjust(TEST_INPUT, 1)
    assert sorted(adjusted.galaxies, key=lambda g: (g.row, g.col)) == plain.galaxies
    assert adjusted.pairwise_length_sum() == plain.pairwise_length_sum()


def test_expansion_of_gap():
    galaxy_map = GalaxyMap.parse_and_adjust("#..#\n")
    assert sorted(g.col for g in galaxy_map.galaxies) == [0, 5]
    assert galaxy_map.pairwise_length_sum() == 5


def test_invalid_rate():
    with pytest.raises(ValueError):
        GalaxyMap.parse_and_adjust(TEST_INPUT, 0)


def test_manhattan_distance():
    assert Galaxy(6, 1).manhattan_distance(Galaxy(11, 5)) == 9
    assert Galaxy(11, 5).manhattan_distance(Galaxy(6, 1)) == 9


def test_empty_map():
    assert GalaxyMap.parse_and_adjust("....\n....\n").pairwise_length_sum() == 0


def test_main(tmp_path, capsys):
    path = tmp_path / "image.txt"
    path.write_text(TEST_INPUT)
    assert main([str(path), "--expansion-rate", "100"]) == 0
    assert capsys.readouterr().out == "Result: 8410\n"