"""Preview images and blank canvases at common screen and page resolutions."""

__version__ = "0.1.0"