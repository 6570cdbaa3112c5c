[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelforge"
version = "0.1.0"
description = "A desktop canvas for previewing images at common screen and page resolutions"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["image", "viewer", "resolution", "aspect-ratio", "canvas", "preview", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
pixelforge = "pixelforge.application:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
