import pytest
from PIL import ImageFont


@pytest.fixture(scope="session")
def font():
    "Pillow's bundled truetype font"
    try:
        f = ImageFont.load_default(size=20)
    except TypeError:
        pytest.skip("Pillow too old for a sized default font")
    if not isinstance(f, ImageFont.FreeTypeFont):
        pytest.skip("Pillow built without FreeType")
    return f


@pytest.fixture
def font_file(font, tmp_path):
    "the bundled font written as fonts/Default.ttf"
    getvalue = getattr(font.path, "getvalue", None)
    if getvalue is None:
        pytest.skip("default font not loaded from memory")
    font_dir = tmp_path / "fonts" / "sans"
    font_dir.mkdir(parents=True)
    path = font_dir / "Default.ttf"
    path.write_bytes(getvalue())
    return path
