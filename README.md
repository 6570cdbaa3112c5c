# PixelForge

PixelForge is a small desktop tool for seeing how an image, or simply a blank
canvas, looks at a given resolution. A sidebar of size controls sits beside a
preview that keeps the chosen aspect ratio. The preview is drawn over a
checkerboard and has the current size printed in its top-left corner.

## Installing

```
pip install .
```

The window is built with Tkinter, which ships with most Python installations.
Images are loaded and scaled with Pillow.

## Running

```
pixelforge
```

The command takes no options apart from `--help`. The window opens at
1280 × 750 with the title `PixelForge`. From the sidebar you can:

- pick one of the presets:
  - 1280 × 720 (16:9)
  - 1920 × 1080 (16:9)
  - 1280 × 1024 (5:4)
  - 1280 × 2400 (Phone)
  - 800 × 1200 (ebook)
  - 1200 × 1200 (Square)
- type a custom width and height and press **Apply Custom Size**. The fields
  accept digits only, and both start at 1000. Each value must lie between 100
  and 10000 pixels. Anything outside that range is refused with the warning
  "Please enter valid dimensions (100-10000 pixels)".
- press **Open Image** to choose a file. The file dialog offers JPEG, PNG, BMP
  and GIF files, and also "All Files". When the image loads, the canvas takes
  on its size and the title shows the file name and dimensions, for example
  `PixelForge - photo.png (640 × 480)`. When an image cannot be read, an error
  box says "Failed to load the image." Any image that was shown before is
  dropped, and the canvas size stays as it was.

After a preset or a custom size is chosen, the title shows the size in use,
for example `PixelForge (1920 × 1080)`. The window is also resized to match:
the new size plus the 190-pixel sidebar.

## Using the pieces directly

The layout and state logic do not need a display:

```python
from pixelforge.layout import canvas_rect, fit_aspect
from pixelforge.state import CanvasState, size_title

canvas = canvas_rect(1280, 750)        # Rect right of the sidebar
print(fit_aspect(canvas, 1920, 1080))  # centred preview, 20 px margin
print(size_title("PixelForge", 1920, 1080))

state = CanvasState()
state.select_preset(1)                 # -> "PixelForge (1920 × 1080)"
state.apply_custom("800", "600")       # -> "PixelForge (800 × 600)"
```

- `pixelforge.presets`: `RESOLUTION_PRESETS`, `parse_dimension` and
  `validate_custom_size`. The last raises `InvalidDimensionsError`, a
  `ValueError`, for sizes out of range.
- `pixelforge.layout`: `Rect`, `canvas_rect`, `fit_aspect`, `checkerboard`
  and `size_label_rect`.
- `pixelforge.state`: `CanvasState` with `resize`, `select_preset`,
  `apply_custom` and `load_image`. `load_image` raises `OSError` when the file
  cannot be read. The module also has `size_title` and `image_title`.
- `pixelforge.main_window`: `control_layout`, which gives the position of
  each sidebar control, and `MainWindow`, the Tkinter window.
- `pixelforge.application`: `Application`, which creates the window and runs
  its event loop, and `main`, the entry point of the `pixelforge` command.

## What it does not do

PixelForge only previews. It does not edit, crop or save images, and it
does not export the canvas at the chosen size.

## Tests

```
pip install ".[test]"
pytest
```