[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rosekit"
version = "0.1.0"
description = "Asset pipeline, project files, reflection and event utilities for a small 2D game engine"
requires-python = ">=3.10"
keywords = ["game", "engine", "assets", "animation", "sprite", "yaml", "project"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyyaml",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rosekit"]

[tool.pytest.ini_options]
addopts = "-ra"
