import pytest

from puzzlebox.lenses import (
    InitializationSequence,
    Operation,
    ParseStepError,
    Step,
    holiday_hash,
    main,
)


def test_hash_of_hash_word():
    assert holiday_hash("HASH") == 52


def test_hash_of_empty_is_zero():
    assert holiday_hash("") == 0


def test_hash_accepts_bytes():
    assert holiday_hash(b"HASH") == holiday_hash("HASH")


@pytest.mark.parametrize(
    "step, expected",
    [("rn=1", 30), ("cm-", 253), ("rn", 0), ("cm", 0)],
)
def test_known_step_hashes(step, expected):
    assert holiday_hash(step) == expected


def test_hash_stays_in_byte_range():
    for text in ["a", "zzzz", "qp=3", "x" * 100]:
        assert 0 <= holiday_hash(text) < 256


def test_sum_of_hashes_trims_input():
    sequence = InitializationSequence.parse("rn=1,cm-\n")
    assert sequence.raw_steps == ("rn=1", "cm-")
    assert sequence.sum_of_hashes() == 283


def test_sum_of_hashes_ignores_step_syntax():
    assert InitializationSequence.parse("rn").sum_of_hashes() == 0


def test_parse_insert_step():
    assert Step.parse("ab=5") == Step("ab", Operation.INSERT, 5)


def test_parse_delete_step():
    assert Step.parse("ab-") == Step("ab", Operation.DELETE)


def test_parse_empty_label():
    assert Step.parse("=5") == Step("", Operation.INSERT, 5)


@pytest.mark.parametrize("text", ["ab", "", "a="])
def test_invalid_representation(text):
    with pytest.raises(ParseStepError):
        Step.parse(text)


@pytest.mark.parametrize("text", ["ab=0", "ab=x", "ab=-"])
def test_illegal_focal_length(text):
    with pytest.raises(ParseStepError, match="focal length"):
        Step.parse(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("rn=1", 1),
        ("rn=1,cm=2", 5),
        ("rn=1,cm=2,rn-", 2),
        ("rn=1,cm=2,rn=7", 11),
        ("rn-", 0),
        ("rn=1,rn-,rn=3", 3),
    ],
)
def test_focusing_power(text, expected):
    assert InitializationSequence.parse(text).focusing_power() == expected


def test_reinsert_after_delete_goes_to_back():
    # rn is removed, then re-added behind cm: cm in slot 1, rn in slot 2.
    sequence = InitializationSequence.parse("rn=1,cm=2,rn-,rn=4")
    assert sequence.focusing_power() == 1 * 1 * 2 + 1 * 2 * 4


def test_focusing_power_rejects_bad_step():
    with pytest.raises(ParseStepError):
        InitializationSequence.parse("rn=1,bad").focusing_power()


def test_steps_parses_each_entry():
    steps = InitializationSequence.parse("rn=1,cm-").steps()
    assert steps == [Step("rn", Operation.INSERT, 1), Step("cm", Operation.DELETE)]


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("rn=1,cm=2\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"Result: {30 + holiday_hash('cm=2')}\n"
    assert main([str(path), "--focusing-power"]) == 0
    assert capsys.readouterr().out == "Result: 5\n"


def test_main_reports_bad_step(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("bad")
    assert main([str(path), "--focusing-power"]) == 1
    assert "error" in capsys.readouterr().err