import base64

import pytest

from pixatar.cli import build_parser, main
from pixatar.generator import encode_png
from pixatar.settings import Background, Endian, Opacity, Orientation, Spec


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.text == "pixatar"
    assert args.hue == 152
    assert args.background == Spec().bg.value
    assert args.bit_order == Spec().ordering.value
    assert args.output is None


def test_print_data_url(capsys):
    assert main(["pixatar"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("data:image/png;base64,")
    assert base64.b64decode(out.split(",", 1)[1]) == encode_png("pixatar", Spec())


def test_empty_text_prints_empty_line(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().out == "\n"


def test_write_png_file(tmp_path):
    target = tmp_path / "avatar.png"
    argv = [
        "abc",
        "--hue", "200",
        "--background", "white",
        "--opacity", "transparent",
        "--orientation", "horizontal",
        "--bit-order", "most",
        "--output", str(target),
    ]
    assert main(argv) == 0
    expected_spec = Spec(
        hue=200,
        bg=Background.WHITE,
        opacity=Opacity.TRANSPARENT,
        orient=Orientation.HORIZONTAL,
        ordering=Endian.MOST,
    )
    assert target.read_bytes() == encode_png("abc", expected_spec)


def test_write_png_empty_text_rejected(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["", "--output", str(tmp_path / "x.png")])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("hue", ["-1", "361", "red"])
def test_invalid_hue_rejected(hue):
    with pytest.raises(SystemExit) as excinfo:
        main(["abc", "--hue", hue])
    assert excinfo.value.code == 2


def test_invalid_choice_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["abc", "--background", "green"])
    assert excinfo.value.code == 2