[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csitems"
version = "0.1.0"
description = "Parse Counter-Strike items_game.txt into structured JSON exports"
requires-python = ">=3.10"
dependencies = []
keywords = ["counter-strike", "items_game", "vdf", "keyvalues", "json", "skins"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csitems = "csitems.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["csitems"]

[tool.pytest.ini_options]
addopts = "-ra"
