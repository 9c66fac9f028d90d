[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phototool"
version = "0.1.0"
description = "Review-surface logic for a local photo library: paged thumbnail grid state, loupe navigation, drop classification, reject undo, display-scale tiers and user-facing error copy."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["photos", "photo library", "review", "thumbnails", "loupe"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["phototool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
