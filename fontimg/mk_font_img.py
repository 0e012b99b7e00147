#!/usr/bin/env python3
"""Font image generator.

Generate a font image for given fonts and sizes. The character cell
dimensions are evaluated from the glyphs of the text, within the limits
given as arguments.

The generated image can be converted to a C file by the UTFT Font Maker
tool. One image is written per font file and size, as
outdir/fontname_SS.png

fontname is a file name mask (without .ttf extension), searched for in
fontdir and its subdirectories, case insensitive. Every font file found
is converted.
"""

import argparse
import fnmatch
import os
import sys
from pathlib import Path

from .cells import CellLimits, ConfigError, check_limits, eval_cell_dim
from .glyphs import FontError, GlyphProbe, open_font
from .raster import gen_image
from .text_table import read_text

# directory in which fonts are searched for
FONT_DIR = "/usr/share/fonts/truetype"
TEXT_FILE = os.path.join(os.path.dirname(__file__), "data", "ascii.txt")


def font_name(filename):
    "font name is the name of the font file without extension"
    return Path(filename).name.split(".", 1)[0]


def find_font_files(mask, font_dir=FONT_DIR):
    "sorted font files matching mask.ttf below font_dir"
    pattern = (mask + ".ttf").lower()
    found = []
    for dirpath, dirnames, filenames in os.walk(font_dir):
        for name in filenames:
            if fnmatch.fnmatchcase(name.lower(), pattern):
                found.append(os.path.join(dirpath, name))
    return sorted(found)


def out_name(outdir, fontname, fontsize):
    return os.path.join(outdir, "%s_%02d.png" % (fontname, fontsize))


def render_font(table, font, limits, char_gap=1, cell_grid=False):
    """measure then draw the table with font.

    returns (geometry, image)
    """
    probe = GlyphProbe(font, limits.width_max, limits.height_max)
    geometry = eval_cell_dim(table.chars(), probe, limits, char_gap)
    return geometry, gen_image(table, geometry, font, cell_grid)


def write_image(img, filename):
    img.save(filename, "png")


# --- Main : commandline parsing


def parse_opt(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a fixed grid font image for given font and size."
    )
    parser.add_argument("--width_min", type=int, default=8,
                        help="minimal width of a cell for a single character")
    parser.add_argument("--width_max", type=int, default=24,
                        help="maximal width of a cell for a single character")
    parser.add_argument("--height_min", type=int, default=8,
                        help="minimal height of a cell for a single character")
    parser.add_argument("--height_max", type=int, default=72,
                        help="maximal height of a cell for a single character")
    parser.add_argument("--char_gap", type=int, default=1,
                        help="extra space between two characters")
    parser.add_argument("--cell_grid", action="store_true",
                        help="cell boundaries enabled in the image")
    parser.add_argument("--fontname", default="FreeMono",
                        help="font name, can be a mask as *Mono*")
    parser.add_argument("--fontsize", type=int, default=24, help="font size")
    parser.add_argument("--fontsize_max", type=int,
                        help="generate all sizes from fontsize to fontsize_max")
    parser.add_argument("--fontdir", default=FONT_DIR,
                        help="directory where font files are searched for")
    parser.add_argument("--textfile", default=TEXT_FILE,
                        help="text to be drawn into the image")
    parser.add_argument("--encoding", default="latin-1",
                        help="encoding of the text file")
    parser.add_argument("--outdir", default="out",
                        help="a directory where the images will be written to")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="no progress messages")
    return parser.parse_args(argv)


def check_opt(opts):
    """check parameter values before anything is drawn.

    returns (limits, font_files, sizes), ConfigError if a value is wrong
    """
    limits = CellLimits(opts.width_min, opts.width_max, opts.height_min, opts.height_max)
    check_limits(limits, opts.char_gap)

    if opts.fontsize <= 0:
        raise ConfigError("Parameter fontsize is not bigger than 0.")
    fontsize_max = opts.fontsize if opts.fontsize_max is None else opts.fontsize_max
    if fontsize_max < opts.fontsize:
        raise ConfigError("Parameter fontsize_max is smaller than fontsize.")
    sizes = range(opts.fontsize, fontsize_max + 1)

    if not os.path.isfile(opts.textfile):
        raise ConfigError("Cannot find file '%s'." % opts.textfile)
    if not os.path.isdir(opts.outdir):
        raise ConfigError("Cannot use directory '%s'." % opts.outdir)

    font_files = find_font_files(opts.fontname, opts.fontdir)
    if not font_files:
        raise ConfigError("Cannot find font file for font '%s'." % opts.fontname)

    return limits, font_files, sizes


def usage(msg):
    print(" Usage error :", msg, file=sys.stderr)
    sys.exit(2)


def error(msg):
    print("ERROR :", msg, file=sys.stderr)
    sys.exit(1)


def main(argv=None):
    opts = parse_opt(argv)

    def log(*args):
        if not opts.quiet:
            print(*args, file=sys.stderr)

    try:
        limits, font_files, sizes = check_opt(opts)
    except ConfigError as e:
        usage(e)
    try:
        table = read_text(opts.textfile, opts.encoding)
    except (ConfigError, UnicodeDecodeError) as e:
        usage(e)
    except OSError as e:
        error("Cannot read '%s' : %s" % (opts.textfile, e))

    # load every font before drawing anything
    try:
        fonts = [
            (fontfile, size, open_font(fontfile, size))
            for fontfile in font_files
            for size in sizes
        ]
    except FontError as e:
        error(e)

    log(" %s : %d fonts, %d sizes" % (table, len(font_files), len(sizes)))
    for fontfile, size, font in fonts:
        geometry, img = render_font(table, font, limits, opts.char_gap, opts.cell_grid)
        filename = out_name(opts.outdir, font_name(fontfile), size)
        log(" - writing %s cell %dx%d baseline %d" % (
            filename, geometry.width, geometry.height, geometry.baseline))
        try:
            write_image(img, filename)
        except OSError as e:
            error("Cannot write '%s' : %s" % (filename, e))


if __name__ == "__main__":
    main()
