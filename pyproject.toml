[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombieshooter"
version = "0.1.0"
description = "Game logic, menus, audio and drawing for a top-down zombie shooter built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "shooter", "top-down", "arcade", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zombieshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
