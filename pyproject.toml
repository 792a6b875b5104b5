[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dirtheme"
version = "0.1.0"
description = "Colour, icon and git-symbol themes for directory listings, loaded from YAML"
requires-python = ">=3.10"
keywords = ["theme", "colors", "icons", "terminal", "ls", "yaml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["dirtheme"]

[tool.pytest.ini_options]
addopts = "-ra"
