import pytest
from PIL import Image

from pixelforge.presets import RESOLUTION_PRESETS, InvalidDimensionsError
from pixelforge.state import CanvasState, image_title, size_title


@pytest.fixture
def png(tmp_path):
    path = tmp_path / "a.png"
    Image.new("RGB", (64, 32), (255, 0, 0)).save(path)
    return path


def test_initial_state():
    state = CanvasState()
    assert state.caption == "PixelForge"
    assert (state.width, state.height) == (1280, 750)
    assert not state.has_image


def test_size_title():
    assert size_title("PixelForge", 800, 600) == "PixelForge (800 × 600)"


def test_image_title_uses_file_name_only():
    assert image_title("PixelForge", "C:\\pics\\cat.png", 640, 480) == "PixelForge - cat.png (640 × 480)"


def test_image_title_with_posix_path():
    assert image_title("T", "/tmp/dir/dog.jpg", 1, 2).startswith("T - dog.jpg ")


def test_select_preset_resizes():
    state = CanvasState()
    caption = state.select_preset(1)
    assert (state.width, state.height) == (1920, 1080)
    assert caption == state.caption == size_title("PixelForge", 1920, 1080)


@pytest.mark.parametrize("index", [-1, len(RESOLUTION_PRESETS)])
def test_select_preset_out_of_range(index):
    state = CanvasState()
    with pytest.raises(IndexError):
        state.select_preset(index)
    assert (state.width, state.height) == (1280, 750)


def test_apply_custom_sets_size():
    state = CanvasState()
    state.apply_custom("800", "600")
    assert (state.custom_width, state.custom_height) == (800, 600)
    assert (state.width, state.height) == (800, 600)


def test_apply_custom_invalid_leaves_state():
    state = CanvasState()
    with pytest.raises(InvalidDimensionsError):
        state.apply_custom("50", "600")
    assert (state.width, state.height) == (1280, 750)
    assert state.custom_width == 0
    assert state.caption == "PixelForge"


def test_load_image_resizes_to_image(png):
    state = CanvasState()
    caption = state.load_image(png)
    assert state.has_image
    assert (state.width, state.height) == (64, 32)
    assert caption.endswith("a.png (64 × 32)")


def test_load_invalid_image_clears_previous(png, tmp_path):
    state = CanvasState()
    state.load_image(png)
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"not an image")
    with pytest.raises(OSError, match="Failed to load the image."):
        state.load_image(broken)
    assert not state.has_image


def test_load_missing_file(tmp_path):
    state = CanvasState()
    with pytest.raises(OSError):
        state.load_image(tmp_path / "missing.png")
    assert not state.has_image