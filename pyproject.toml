[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbitmap"
version = "0.1.0"
description = "Monochrome bitmap drawing and C array code export for small displays"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["bitmap", "oled", "monochrome", "embedded", "c-array", "pixel-art"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cbitmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
