"""fontimg : generate fixed grid font images for embedded displays.

A text table is measured with a truetype font to find one cell size and
baseline for every character, then every character is drawn in its own
cell of a monochrome image.
"""

from .text_table import TextTable, load_text, read_text
from .glyphs import GlyphBox, GlyphProbe, FontError, open_font, has_glyph
from .cells import CellLimits, CellGeometry, ConfigError, check_limits, eval_cell_dim
from .raster import gen_image, grid_lines

__version__ = "0.1.0"
