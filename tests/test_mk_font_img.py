import pytest
from PIL import Image

from fontimg.cells import ConfigError
from fontimg.mk_font_img import (
    check_opt,
    find_font_files,
    font_name,
    main,
    out_name,
    parse_opt,
)


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "text.txt"
    path.write_text("AB\nC\n\n", encoding="latin-1")
    return path


@pytest.fixture
def outdir(tmp_path):
    path = tmp_path / "out"
    path.mkdir()
    return path


def args(font_file, text_file, outdir, *extra):
    return [
        "--fontdir", str(font_file.parent.parent),
        "--fontname", "default",
        "--textfile", str(text_file),
        "--outdir", str(outdir),
        "--quiet",
        *extra,
    ]


def test_defaults():
    opts = parse_opt([])
    assert (opts.width_min, opts.width_max) == (8, 24)
    assert (opts.height_min, opts.height_max) == (8, 72)
    assert opts.char_gap == 1
    assert not opts.cell_grid
    assert (opts.fontname, opts.fontsize) == ("FreeMono", 24)


def test_names():
    assert font_name("/usr/share/fonts/truetype/freefont/FreeMono.ttf") == "FreeMono"
    assert out_name("out", "FreeMono", 8) == "out/FreeMono_08.png"
    assert out_name("out", "FreeMono", 24) == "out/FreeMono_24.png"


def test_find_font_files(tmp_path):
    for name in ("a/FreeMono.ttf", "b/FreeMonoBold.TTF", "b/FreeSans.ttf", "c/FreeMono.otf"):
        path = tmp_path / name
        path.parent.mkdir(exist_ok=True)
        path.touch()
    found = find_font_files("freemono*", str(tmp_path))
    assert [font_name(f) for f in found] == ["FreeMono", "FreeMonoBold"]
    assert find_font_files("FreeMono", str(tmp_path)) == [str(tmp_path / "a" / "FreeMono.ttf")]
    assert find_font_files("Nothing", str(tmp_path)) == []


def test_check_opt(font_file, text_file, outdir):
    opts = parse_opt(args(font_file, text_file, outdir, "--fontsize", "10", "--fontsize_max", "12"))
    limits, font_files, sizes = check_opt(opts)
    assert limits == (8, 24, 8, 72)
    assert font_files == [str(font_file)]
    assert list(sizes) == [10, 11, 12]


@pytest.mark.parametrize(
    "extra",
    [
        ["--width_min", "12"],
        ["--width_max", "0"],
        ["--height_min", "-1"],
        ["--char_gap", "-2"],
        ["--fontsize", "0"],
        ["--fontsize", "20", "--fontsize_max", "10"],
        ["--fontname", "Nothing"],
    ],
)
def test_check_opt_errors(font_file, text_file, outdir, extra):
    with pytest.raises(ConfigError):
        check_opt(parse_opt(args(font_file, text_file, outdir, *extra)))


def test_check_opt_missing_files(font_file, text_file, outdir, tmp_path):
    with pytest.raises(ConfigError):
        check_opt(parse_opt(args(font_file, tmp_path / "none.txt", outdir)))
    with pytest.raises(ConfigError):
        check_opt(parse_opt(args(font_file, text_file, tmp_path / "none")))


def test_main_writes_one_image_per_size(font_file, text_file, outdir):
    main(args(font_file, text_file, outdir, "--fontsize", "16", "--fontsize_max", "17", "--cell_grid"))
    assert sorted(p.name for p in outdir.iterdir()) == ["Default_16.png", "Default_17.png"]
    with Image.open(outdir / "Default_16.png") as img:
        assert img.mode == "P"
        w, h = img.size
        assert w % 16 == 0  # 2 columns of a multiple of 8
        assert h % 3 == 0  # 3 rows
        assert 8 <= h // 3 <= 72


def test_main_config_error(font_file, text_file, outdir, capsys):
    with pytest.raises(SystemExit) as e:
        main(args(font_file, text_file, outdir, "--width_min", "7"))
    assert e.value.code == 2
    assert "width_min" in capsys.readouterr().err
    assert list(outdir.iterdir()) == []


def test_main_bad_font(font_file, text_file, outdir, capsys):
    (font_file.parent / "Default_broken.ttf").write_bytes(b"not a font")
    with pytest.raises(SystemExit) as e:
        main(args(font_file, text_file, outdir, "--fontname", "default*"))
    assert e.value.code == 1
    assert "ERROR" in capsys.readouterr().err
    # nothing is written when one of the fonts cannot be loaded
    assert list(outdir.iterdir()) == []


def test_main_unreadable_text(font_file, text_file, outdir, monkeypatch, capsys):
    def unreadable(filename, encoding):
        raise PermissionError(13, "Permission denied", filename)

    monkeypatch.setattr("fontimg.mk_font_img.read_text", unreadable)
    with pytest.raises(SystemExit) as e:
        main(args(font_file, text_file, outdir))
    assert e.value.code == 1
    assert "Cannot read" in capsys.readouterr().err
    assert list(outdir.iterdir()) == []
