[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridstate"
version = "0.1.0"
description = "Editor-side state for a Neovim external UI: redraw event parsing, character grids, windows, cursors and draw command batching"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["neovim", "nvim", "gui", "redraw", "external-ui", "grid", "editor"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["gridstate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
