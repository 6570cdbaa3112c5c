"""The editable state behind the main window: canvas size, presets and image."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import PureWindowsPath

from PIL import Image

from .presets import RESOLUTION_PRESETS, ResolutionPreset, validate_custom_size

DEFAULT_TITLE = "PixelForge"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 750

LOAD_FAILED_MESSAGE = "Failed to load the image."


def size_title(title: str, width: int, height: int) -> str:
    """Window caption showing the current canvas size."""
    return f"{title} ({width} × {height})"


def image_title(title: str, path: str | PathLike[str], width: int, height: int) -> str:
    """Window caption showing the loaded file's name and its size."""
    name = PureWindowsPath(str(path)).name
    return f"{title} - {name} ({width} × {height})"


@dataclass
class CanvasState:
    """Current canvas size, caption and loaded image of a window."""

    title: str = DEFAULT_TITLE
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    presets: tuple[ResolutionPreset, ...] = RESOLUTION_PRESETS
    custom_width: int = 0
    custom_height: int = 0
    image: Image.Image | None = None
    caption: str = field(init=False)

    def __post_init__(self) -> None:
        self.caption = self.title

    @property
    def has_image(self) -> bool:
        return self.image is not None

    def resize(self, width: int, height: int) -> str:
        """Set the canvas size and return the new caption."""
        self.width = width
        self.height = height
        self.caption = size_title(self.title, width, height)
        return self.caption

    def select_preset(self, index: int) -> str:
        """Resize to the preset at index."""
        if not 0 <= index < len(self.presets):
            raise IndexError(f"no preset at index {index}")
        preset = self.presets[index]
        return self.resize(preset.width, preset.height)

    def apply_custom(self, width_text: str, height_text: str) -> str:
        """Resize to a custom size typed by the user; raises InvalidDimensionsError."""
        width, height = validate_custom_size(width_text, height_text)
        self.custom_width = width
        self.custom_height = height
        return self.resize(width, height)

    def load_image(self, path: str | PathLike[str]) -> str:
        """Load an image, size the canvas to it and return the new caption.

        Any previously loaded image is dropped first; on failure OSError is raised
        and no image remains loaded.
        """
        self.image = None
        try:
            with Image.open(path) as opened:
                opened.load()
                image = opened.copy()
        except (OSError, ValueError) as exc:
            raise OSError(LOAD_FAILED_MESSAGE) from exc
        self.image = image
        width, height = image.size
        self.resize(width, height)
        self.caption = image_title(self.title, path, width, height)
        return self.caption