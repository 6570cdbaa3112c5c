"""Application start-up: build the main window and run its event loop."""

from __future__ import annotations

import argparse
import sys
import tkinter as tk
from collections.abc import Callable, Sequence
from typing import Any

from .main_window import MainWindow
from .state import DEFAULT_HEIGHT, DEFAULT_TITLE, DEFAULT_WIDTH

INIT_FAILED_MESSAGE = "Application initialization failed!"


class ApplicationError(RuntimeError):
    """Raised when the application cannot start or run."""


def _default_window_factory() -> MainWindow:
    root = tk.Tk()
    return MainWindow(root, DEFAULT_TITLE, DEFAULT_WIDTH, DEFAULT_HEIGHT)


class Application:
    """Owns the main window and drives its event loop."""

    def __init__(self, window_factory: Callable[[], Any] | None = None) -> None:
        self._window_factory = window_factory or _default_window_factory
        self.window: Any = None

    def initialize(self) -> None:
        """Create the main window; raises ApplicationError on any failure."""
        try:
            self.window = self._window_factory()
        except Exception as exc:
            self.window = None
            raise ApplicationError(INIT_FAILED_MESSAGE) from exc

    def run(self) -> int:
        """Show the window and block until it is closed; returns the exit code."""
        if self.window is None:
            raise ApplicationError("Application is not initialized")
        self.window.show()
        self.window.root.mainloop()
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pixelforge", description="Preview canvas sizes and images."
    )
    parser.parse_args(argv)

    app = Application()
    try:
        app.initialize()
    except ApplicationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return app.run()


if __name__ == "__main__":
    sys.exit(main())