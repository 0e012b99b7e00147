"""draw a text table into a fixed grid font image.

The image is a 3 colour palette image : background, cell grid and text.
Each character is centered in its cell, with its baseline at the same
height in every cell. Ink falling outside of its cell is cut.
"""

from PIL import Image, ImageDraw

from .glyphs import NOTDEF_CHAR, glyph_mask, has_glyph

BG_COLOR = (0x00, 0x00, 0x00)  # background
CB_COLOR = (0x10, 0x10, 0x10)  # cell boundary
TXT_COLOR = (0xFF, 0xFF, 0xFF)  # font

# palette indices
BG, CB, TXT = range(3)


def new_canvas(n_columns, n_rows, geometry):
    "image of n_columns x n_rows cells, filled with background"
    img = Image.new(
        "P", (n_columns * geometry.width, n_rows * geometry.height), BG
    )
    img.putpalette(BG_COLOR + CB_COLOR + TXT_COLOR)
    return img


def grid_lines(n_columns, n_rows, geometry):
    """cell boundaries as ((x1, y1), (x2, y2)) lines, horizontal first.

    Each line crosses the top left corner [0,0] of a cell. The last
    horizontal and vertical lines lie on the outer edge of the image.
    """
    w = n_columns * geometry.width
    h = n_rows * geometry.height
    lines = []
    for row_i in range(n_rows + 1):
        y = row_i * geometry.height
        lines.append(((0, y), (w, y)))
    for col_i in range(n_columns + 1):
        x = col_i * geometry.width
        lines.append(((x, 0), (x, h)))
    return lines


def draw_grid(draw, n_columns, n_rows, geometry):
    for line in grid_lines(n_columns, n_rows, geometry):
        draw.line(line, fill=CB)


def gen_image(table, geometry, font, cell_grid=False):
    "draw all characters of table, one per cell"
    img = new_canvas(table.n_columns, table.n_rows, geometry)

    # grid first, glyphs are drawn over it
    if cell_grid:
        draw_grid(ImageDraw.Draw(img), table.n_columns, table.n_rows, geometry)

    # each glyph is drawn on a cell sized mask, ink outside its cell is cut
    cell = Image.new("1", (geometry.width, geometry.height))
    cell_draw = ImageDraw.Draw(cell)
    anchor = (geometry.width // 2 + 1, geometry.baseline)

    notdef = glyph_mask(font, NOTDEF_CHAR)
    for row_i, col_i, ch in table.cells():
        if not has_glyph(font, ch, notdef):
            continue
        cell.paste(0, (0, 0) + cell.size)
        cell_draw.text(anchor, ch, fill=255, font=font, anchor="ms")
        x = col_i * geometry.width
        y = row_i * geometry.height
        img.paste(TXT, (x, y, x + geometry.width, y + geometry.height), cell)

    return img
