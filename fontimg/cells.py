"""evaluate the character cell of a font image.

Every character of the text is measured, the widest glyph gives the cell
width, the highest and lowest ink give the cell height and the baseline.

- cell width : widest glyph + char gap, rounded up to a whole number of
  bytes (multiple of 8 pixels), within [width_min, width_max]
- cell height : bottom - top + 1, lowered by CELL_HEADROOM, within
  [height_min, height_max]
- baseline : distance from the top of a cell to the text baseline

The same geometry is used for every cell of the image.

Pillow glyph boxes have an exclusive bottom, so with CELL_HEADROOM the
deepest descender of the text loses its last row of ink (glyphs are cut
to their cell when drawn).
"""

from collections import namedtuple

CELL_ALIGN = 8  # cell width is a whole number of bytes per line
CELL_HEADROOM = 2  # lowered by 2 is still enough

CellLimits = namedtuple("CellLimits", "width_min width_max height_min height_max")
CellLimits.__new__.__defaults__ = (8, 24, 8, 72)

CellGeometry = namedtuple("CellGeometry", "width height baseline")


class ConfigError(ValueError):
    "invalid parameter, found before anything is drawn"


def check_limits(limits, char_gap=0):
    "raise ConfigError if cell limits or char gap cannot be used"
    for name in ("width_min", "width_max"):
        value = getattr(limits, name)
        if value <= 0:
            raise ConfigError("Parameter %s is not bigger than 0." % name)
        if value % CELL_ALIGN:
            raise ConfigError(
                "Parameter %s is not an integer multiple of %d." % (name, CELL_ALIGN)
            )
    for name in ("height_min", "height_max"):
        if getattr(limits, name) <= 0:
            raise ConfigError("Parameter %s is not bigger than 0." % name)
    if limits.width_min > limits.width_max:
        raise ConfigError("Parameter width_min is bigger than width_max.")
    if limits.height_min > limits.height_max:
        raise ConfigError("Parameter height_min is bigger than height_max.")
    if char_gap < 0:
        raise ConfigError("Parameter char_gap is negative.")


def clamp(value, vmin, vmax):
    return min(max(value, vmin), vmax)


def round_up(value, align=CELL_ALIGN):
    "next multiple of align, value itself if already aligned"
    return (value + align - 1) // align * align


def eval_cell_dim(chars, measure, limits, char_gap=1):
    """evaluate the cell geometry for all characters.

    measure(ch) returns the GlyphBox of a character drawn at (0, 0) with its
    baseline on y=0. Empty boxes (missing glyphs) are ignored. The result
    does not depend on the order of chars.
    """
    width = 0
    top = limits.height_max  # nothing seen yet
    bottom = 0
    for ch in chars:
        box = measure(ch)
        if box.empty:
            continue
        width = max(width, box.right)
        top = min(top, box.top)
        bottom = max(bottom, box.bottom)

    width = clamp(round_up(width + char_gap), limits.width_min, limits.width_max)
    height = clamp(
        bottom - top + 1 - CELL_HEADROOM, limits.height_min, limits.height_max
    )
    return CellGeometry(width, height, -top)
