[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cadetkit"
version = "0.1.0"
description = "C-style string, memory and formatting helpers, a buffered line reader, an integer stack and a text-mode tile-map maze game."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "strings",
    "printf",
    "line-reader",
    "stack",
    "tile-map",
    "flood-fill",
    "game",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cadetkit-lines = "cadetkit.linereader:main"
cadetkit-stack = "cadetkit.stack:main"
cadetkit-game = "cadetkit.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cadetkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
