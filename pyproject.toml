[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evolution"
version = "1.0.0"
description = "A small side-scrolling platform game: walk, jump, collect tools and dodge monsters across three levels."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "side-scroller", "pygame", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
evolution = "evolution.game:main"

[tool.hatch.build.targets.wheel]
packages = ["evolution"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
