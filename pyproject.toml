[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgview"
version = "0.1.0"
description = "Toolkit-independent logic for an image viewer: selection rectangles, auto-scroll, multi-click detection, commands, configuration, file sorting and texel formatting."
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "viewer", "selection", "autoscroll", "texel", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["imgview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
