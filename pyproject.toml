[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdglance"
version = "0.1.0"
description = "Building blocks for a keyboard-driven Markdown viewer: keybindings, key combos, themes, image data, HTML tag handling and file watching"
requires-python = ">=3.11"
keywords = ["markdown", "viewer", "keybindings", "key-combos", "themes", "file-watcher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "lz4",
    "pillow",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mdglance"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
