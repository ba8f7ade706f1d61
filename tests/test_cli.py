import pytest
from PIL import Image

from asciicam.cli import main


@pytest.fixture
def black_png(tmp_path):
    path = tmp_path / "black.png"
    Image.new("RGB", (160, 90), (0, 0, 0)).save(path)
    return path


def test_prints_grid(black_png, capsys):
    assert main([str(black_png), "-r", "ultra-low", "-p", "simple"]) == 0
    out = capsys.readouterr().out
    assert out == ("@" * 40 + "\n") * 22


def test_trailing_newline_flag(black_png, capsys):
    main([str(black_png), "-r", "ultra-low", "-p", "binary", "-t"])
    assert capsys.readouterr().out == ("0" * 40 + "\n") * 22


def test_sequence_of_frames(black_png, tmp_path, capsys):
    white = tmp_path / "white.png"
    Image.new("RGB", (160, 90), (255, 255, 255)).save(white)
    main([str(black_png), str(white), "-r", "ultra-low", "-p", "binary"])
    lines = capsys.readouterr().out.split("\n")
    assert lines[0] == "0" * 40
    assert lines[22] == "1" * 40


def test_colour_output(black_png, capsys):
    main([str(black_png), "-r", "ultra-low", "-c"])
    assert "\033[38;2;0;0;0m" in capsys.readouterr().out


def test_export_last_frame(black_png, tmp_path, capsys):
    out = tmp_path / "capture.txt"
    assert main([str(black_png), "-r", "low", "-p", "simple", "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == ("@" * 60 + "\n") * 34


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "nope.png")])
    assert excinfo.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_rejects_unknown_palette(black_png):
    with pytest.raises(SystemExit):
        main([str(black_png), "-p", "rainbow"])


def test_infinite_char_aspect_does_not_crash(black_png, capsys):
    assert main([str(black_png), "-r", "native", "-p", "binary", "-a", "inf"]) == 0
    assert capsys.readouterr().out == "0\n"


def test_export_keeps_row_terminators_with_trailing_flag(black_png, tmp_path, capsys):
    out = tmp_path / "capture.txt"
    main([str(black_png), "-r", "ultra-low", "-p", "binary", "-t", "-o", str(out)])
    assert out.read_text(encoding="utf-8") == ("0" * 40 + "\n") * 22
