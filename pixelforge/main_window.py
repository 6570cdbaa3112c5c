"""The main window: a sidebar of size controls beside an aspect-ratio preview."""

from __future__ import annotations

import tkinter as tk
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from tkinter import filedialog, messagebox

from PIL import Image, ImageTk

from .layout import Rect, canvas_rect, checkerboard, fit_aspect, size_label_rect, SIDEBAR_WIDTH
from .presets import RESOLUTION_PRESETS, InvalidDimensionsError, ResolutionPreset
from .state import DEFAULT_HEIGHT, DEFAULT_TITLE, DEFAULT_WIDTH, CanvasState

BUTTON_HEIGHT = 30
BUTTON_WIDTH = 150
BUTTON_MARGIN = 10
SIDEBAR_PADDING = 20
FIRST_CONTROL_Y = 70
DEFAULT_CUSTOM_TEXT = "1000"

SIDEBAR_COLOUR = "#f0f0f5"
SEPARATOR_COLOUR = "#c8c8c8"
TEXT_COLOUR = "#323232"
HINT_COLOUR = "#787878"
CANVAS_COLOUR = "#ffffff"
CHECKER_LIGHT = "#f0f0f0"
CHECKER_DARK = "#dcdcdc"
BORDER_COLOUR = "#646464"

IMAGE_FILETYPES = (
    ("Image Files", "*.jpg *.jpeg *.png *.bmp *.gif"),
    ("All Files", "*.*"),
)


class ControlId(IntEnum):
    """Identifiers of the sidebar controls."""

    PRESET_BASE = 100
    CUSTOM_WIDTH = 200
    CUSTOM_HEIGHT = 201
    APPLY_CUSTOM = 202
    OPEN_IMAGE = 203


class ControlKind(Enum):
    BUTTON = "button"
    LABEL = "label"
    ENTRY = "entry"


@dataclass(frozen=True)
class ControlPlacement:
    """Where one sidebar control sits and what it shows."""

    kind: ControlKind
    text: str
    x: int
    y: int
    width: int
    height: int
    control_id: int | None = None


def control_layout(presets: Sequence[ResolutionPreset]) -> list[ControlPlacement]:
    """Place the sidebar controls top to bottom for the given presets."""
    x = SIDEBAR_PADDING
    y = FIRST_CONTROL_Y
    controls: list[ControlPlacement] = []

    for index, preset in enumerate(presets):
        controls.append(
            ControlPlacement(
                ControlKind.BUTTON, preset.label, x, y,
                BUTTON_WIDTH, BUTTON_HEIGHT, ControlId.PRESET_BASE + index,
            )
        )
        y += BUTTON_HEIGHT + BUTTON_MARGIN

    y += BUTTON_MARGIN
    controls.append(ControlPlacement(ControlKind.LABEL, "Custom Resolution:", x, y, BUTTON_WIDTH, 20))
    y += 25

    controls.append(
        ControlPlacement(ControlKind.ENTRY, DEFAULT_CUSTOM_TEXT, x, y, 60, 25, ControlId.CUSTOM_WIDTH)
    )
    controls.append(ControlPlacement(ControlKind.LABEL, "×", 85, y + 5, 10, 20))
    controls.append(
        ControlPlacement(ControlKind.ENTRY, DEFAULT_CUSTOM_TEXT, 100, y, 60, 25, ControlId.CUSTOM_HEIGHT)
    )
    y += 35

    controls.append(
        ControlPlacement(
            ControlKind.BUTTON, "Apply Custom Size", x, y,
            BUTTON_WIDTH, BUTTON_HEIGHT, ControlId.APPLY_CUSTOM,
        )
    )
    y += BUTTON_HEIGHT + BUTTON_MARGIN * 2

    controls.append(
        ControlPlacement(
            ControlKind.BUTTON, "Open Image", x, y,
            BUTTON_WIDTH, BUTTON_HEIGHT, ControlId.OPEN_IMAGE,
        )
    )
    return controls


def _digits_only(proposed: str) -> bool:
    return proposed == "" or proposed.isdigit()


class MainWindow:
    """A top-level window previewing a canvas size and an optional image."""

    def __init__(
        self,
        root: tk.Tk,
        title: str = DEFAULT_TITLE,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        self.root = root
        self.state = CanvasState(title=title, width=width, height=height)
        self._photo: ImageTk.PhotoImage | None = None
        self._entries: dict[int, tk.Entry] = {}

        root.withdraw()
        root.title(self.state.caption)
        x = (root.winfo_screenwidth() - width) // 2
        y = (root.winfo_screenheight() - height) // 2
        root.geometry(f"{width}x{height}+{x}+{y}")

        self._canvas = tk.Canvas(
            root, width=width, height=height, highlightthickness=0, background=CANVAS_COLOUR
        )
        self._canvas.pack(fill=tk.BOTH, expand=True)
        self._canvas.bind("<Configure>", lambda _event: self.redraw())

        self._create_controls()

    def _create_controls(self) -> None:
        validate = (self.root.register(_digits_only), "%P")
        actions: dict[int, Callable[[], None]] = {
            ControlId.APPLY_CUSTOM: self._apply_custom,
            ControlId.OPEN_IMAGE: self._open_image,
        }
        for index in range(len(self.state.presets)):
            actions[ControlId.PRESET_BASE + index] = lambda i=index: self._select_preset(i)

        for placement in control_layout(self.state.presets):
            if placement.kind is ControlKind.BUTTON:
                widget: tk.Widget = tk.Button(
                    self.root, text=placement.text, command=actions[placement.control_id]
                )
            elif placement.kind is ControlKind.ENTRY:
                entry = tk.Entry(self.root, validate="key", validatecommand=validate)
                entry.insert(0, placement.text)
                self._entries[placement.control_id] = entry
                widget = entry
            else:
                widget = tk.Label(
                    self.root, text=placement.text, anchor="w", background=SIDEBAR_COLOUR
                )
            widget.place(x=placement.x, y=placement.y, width=placement.width, height=placement.height)

    def show(self) -> None:
        """Make the window visible and paint it."""
        self.root.deiconify()
        self.root.update_idletasks()
        self.redraw()

    def _client_size(self) -> tuple[int, int]:
        width = self._canvas.winfo_width()
        height = self._canvas.winfo_height()
        if width <= 1 and height <= 1:
            width = self._canvas.winfo_reqwidth()
            height = self._canvas.winfo_reqheight()
        return width, height

    def redraw(self) -> None:
        """Repaint the sidebar background and the preview."""
        canvas = self._canvas
        canvas.delete("all")
        width, height = self._client_size()

        canvas.create_rectangle(0, 0, SIDEBAR_WIDTH, height, fill=SIDEBAR_COLOUR, outline="")
        canvas.create_line(SIDEBAR_WIDTH, 0, SIDEBAR_WIDTH, height, fill=SEPARATOR_COLOUR)
        canvas.create_text(
            SIDEBAR_PADDING, SIDEBAR_PADDING, text=DEFAULT_TITLE, anchor="nw", fill=TEXT_COLOUR
        )
        self._draw_canvas(canvas_rect(width, height))

    def _draw_canvas(self, area: Rect) -> None:
        canvas = self._canvas
        canvas.create_rectangle(
            area.left, area.top, area.right, area.bottom, fill=CANVAS_COLOUR, outline=""
        )

        preview = fit_aspect(area, self.state.width, self.state.height)
        if preview is None:
            canvas.create_text(
                (area.left + area.right) // 2,
                (area.top + area.bottom) // 2,
                text="Select a resolution to begin",
                fill=HINT_COLOUR,
            )
            return

        for cell, light in checkerboard(preview):
            canvas.create_rectangle(
                cell.left, cell.top, cell.right, cell.bottom,
                fill=CHECKER_LIGHT if light else CHECKER_DARK, outline="",
            )

        self._photo = None
        if self.state.image is not None and preview.width > 0 and preview.height > 0:
            image = self.state.image
            if image.mode not in ("RGB", "RGBA"):
                image = image.convert("RGBA")
            scaled = image.resize((preview.width, preview.height), Image.Resampling.BICUBIC)
            self._photo = ImageTk.PhotoImage(scaled)
            canvas.create_image(preview.left, preview.top, image=self._photo, anchor="nw")

        canvas.create_rectangle(
            preview.left, preview.top, preview.right - 1, preview.bottom - 1, outline=BORDER_COLOUR
        )

        label = size_label_rect(preview)
        canvas.create_rectangle(
            label.left, label.top, label.right, label.bottom, fill=CANVAS_COLOUR, outline=""
        )
        canvas.create_text(
            label.left, label.top,
            text=f"{self.state.width} × {self.state.height}",
            anchor="nw", fill=TEXT_COLOUR,
        )

    def _apply_size(self) -> None:
        self.root.title(self.state.caption)
        self.root.geometry(f"{self.state.width + SIDEBAR_WIDTH}x{self.state.height}")
        self.redraw()

    def _select_preset(self, index: int) -> None:
        self.state.select_preset(index)
        self._apply_size()

    def _apply_custom(self) -> None:
        width_text = self._entries[ControlId.CUSTOM_WIDTH].get()
        height_text = self._entries[ControlId.CUSTOM_HEIGHT].get()
        try:
            self.state.apply_custom(width_text, height_text)
        except InvalidDimensionsError as exc:
            messagebox.showwarning("Invalid Dimensions", str(exc), parent=self.root)
            return
        self._apply_size()

    def _open_image(self) -> None:
        path = filedialog.askopenfilename(parent=self.root, filetypes=IMAGE_FILETYPES)
        if not path:
            return
        try:
            self.state.load_image(path)
        except OSError as exc:
            messagebox.showerror("Error", str(exc), parent=self.root)
            self.redraw()
            return
        self._apply_size()


__all__ = [
    "RESOLUTION_PRESETS",
    "ControlId",
    "ControlKind",
    "ControlPlacement",
    "MainWindow",
    "control_layout",
]