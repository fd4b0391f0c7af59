import pytest

from tenpin.cli import main


def test_default_example_game(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "Final Total Score: 133"


def test_perfect_game(capsys):
    assert main(["10"] * 12) == 0
    assert capsys.readouterr().out.strip() == "Final Total Score: 300"


def test_invalid_pins_reports_error(capsys):
    assert main(["11"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error" in captured.err


def test_invalid_frame_reports_error(capsys):
    assert main(["7", "4"]) == 1
    assert "more than 10 pins" in capsys.readouterr().err


def test_non_integer_roll_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["x"])
    assert excinfo.value.code == 2