[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icedit-view"
version = "0.1.0"
description = "Viewport, layout and draw-operation model for a tab-aware text editor view"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "viewport", "scrolling", "tabs", "rendering", "scrollbar"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["icedit_view"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
