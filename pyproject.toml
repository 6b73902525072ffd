[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minisolar"
version = "0.1.0"
description = "A small 2D solar-system demo with a transform hierarchy, a scrolling camera and a pygame renderer"
requires-python = ">=3.10"
keywords = ["game", "2d", "transform", "scene-graph", "pygame", "solar-system"]
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minisolar = "minisolar.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minisolar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
