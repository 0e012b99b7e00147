"""measure glyphs of a truetype font.

A glyph is drawn left aligned with its baseline at (0, 0) on a scratch
1bpp image. Its box is (left, top, right, bottom) in pixels, top being
negative above the baseline.
"""

import sys
from collections import namedtuple

from PIL import Image, ImageDraw, ImageFont

DEBUG = False

# a noncharacter, always drawn with the .notdef glyph
NOTDEF_CHAR = "\uffff"


class FontError(OSError):
    "font file cannot be used"


class GlyphBox(namedtuple("GlyphBox", "left top right bottom")):
    __slots__ = ()

    @property
    def empty(self):
        return self.right <= self.left and self.bottom <= self.top


EMPTY_BOX = GlyphBox(0, 0, 0, 0)


def open_font(filename, size):
    "load a truetype font, FontError if the file or size is not usable"
    if size <= 0:
        raise FontError("font size %r is not bigger than 0" % (size,))
    try:
        return ImageFont.truetype(filename, size)
    except (OSError, ValueError) as e:
        raise FontError("cannot load font '%s' size %d : %s" % (filename, size, e))


def glyph_mask(font, ch):
    "1bpp mask of a character, as (size, pixels)"
    mask = font.getmask(ch, mode="1")
    return mask.size, tuple(mask)


def has_glyph(font, ch, notdef=None):
    """False if the font draws ch with its .notdef glyph.

    notdef is glyph_mask(font, NOTDEF_CHAR), computed when not given.
    """
    if ch == NOTDEF_CHAR:
        return True
    if notdef is None:
        notdef = glyph_mask(font, NOTDEF_CHAR)
    return glyph_mask(font, ch) != notdef


class GlyphProbe:
    "measure characters of a font on a scratch canvas"

    def __init__(self, font, width_max, height_max):
        self.font = font
        self.notdef = glyph_mask(font, NOTDEF_CHAR)
        self.scratch = Image.new("1", (width_max, height_max))
        self.draw = ImageDraw.Draw(self.scratch)

    def __call__(self, ch):
        if not has_glyph(self.font, ch, self.notdef):
            if DEBUG:
                print("no glyph for %r" % ch, file=sys.stderr)
            return EMPTY_BOX
        box = GlyphBox(*self.draw.textbbox((0, 0), ch, font=self.font, anchor="ls"))
        if DEBUG:
            print("%r : %s" % (ch, box), file=sys.stderr)
        return box
