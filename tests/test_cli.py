import pytest

from numconverter.cli import main, run
from numconverter.config import ConverterConfig


def _lines(text):
    return text.strip().splitlines()


def test_default_bases(capsys):
    main(["187"])
    assert _lines(capsys.readouterr().out) == [
        "Base 02: 1011_1011",
        "Base 08: 273",
        "Base 10: 187",
        "Base 16: BB",
    ]


def test_alias_with_targets(capsys):
    main(["h", "BB", "2", "10"])
    assert _lines(capsys.readouterr().out) == ["Base 02: 1011_1011", "Base 10: 187"]


def test_shift_correction(capsys):
    main(["80", "16"])
    assert _lines(capsys.readouterr().out) == ["Base 16: 50"]


def test_from_base_flag(capsys):
    main(["-f", "2", "1011", "16", "8"])
    assert _lines(capsys.readouterr().out) == ["Base 16: B", "Base 08: 13"]


def test_alias_wins_over_from_base_flag(capsys):
    main(["-f", "2", "o", "17", "10"])
    assert _lines(capsys.readouterr().out) == ["Base 10: 15"]


def test_bare_and_no_sep(capsys):
    main(["--bare", "--no-sep", "b", "1011_1011", "2", "16"])
    assert _lines(capsys.readouterr().out) == ["10111011", "BB"]


def test_custom_separator(capsys):
    main(["--bare", "--sep-char", ",", "-l", "3", "1,000,000", "10"])
    assert _lines(capsys.readouterr().out) == ["1,000,000"]


def test_pad(capsys):
    main(["--bare", "-p", "12", "187", "2"])
    assert _lines(capsys.readouterr().out) == ["0000_1011_1011"]


def test_silent(capsys):
    main(["-s", "187"])
    assert capsys.readouterr().out == ""


def test_silent_still_checks_target_bases(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-s", "187", "34"])
    assert exc.value.code == 4
    assert capsys.readouterr().out == ""


def test_verbosity_goes_to_stderr(capsys):
    main(["-vv", "--bare", "187", "16"])
    captured = capsys.readouterr()
    assert _lines(captured.out) == ["BB"]
    assert "ConverterConfig" in captured.err
    assert "shifted" in captured.err


def test_large_value_is_not_wrapped(capsys):
    main(["--bare", "--no-sep", "x", "F" * 32, "2"])
    assert _lines(capsys.readouterr().out) == ["1" * 128]


def test_run_returns_lines():
    config = ConverterConfig(from_base_char="d", from_num="187", to_bases=("16", "33"), bare=True)
    assert run(config) == ["BB", "5M"]


def test_missing_number_exit_code(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["d"])
    assert exc.value.code == 3
    assert "no number to convert was provided" in capsys.readouterr().err


def test_invalid_digit_exit_code(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["b", "1021"])
    assert exc.value.code == 5
    assert "Base Conversion Error" in capsys.readouterr().err


def test_overflow_exit_code():
    with pytest.raises(SystemExit) as exc:
        main(["x", "1" + "0" * 32])
    assert exc.value.code == 5


def test_bad_target_base_stops_remaining(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["187", "2", "ten", "16"])
    assert exc.value.code == 4
    captured = capsys.readouterr()
    assert _lines(captured.out) == ["Base 02: 1011_1011"]
    assert "ten" in captured.err


@pytest.mark.parametrize("base", ["0", "1", "34"])
def test_out_of_range_target_base(base):
    with pytest.raises(SystemExit) as exc:
        main(["187", base])
    assert exc.value.code == 4


def test_bad_input_base_exit_code():
    with pytest.raises(SystemExit) as exc:
        main(["-f", "40", "187"])
    assert exc.value.code == 3


@pytest.mark.parametrize(
    "argv",
    [
        ["--sep-char", "ab", "187"],
        ["--sep-char", "0", "100", "10"],
        ["--sep-char", "a", "h", "BAD"],
        ["-p", "300", "187"],
        ["-l", "-1", "187"],
        [],
    ],
)
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
