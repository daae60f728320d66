[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sealhunter"
version = "0.0.1"
description = "A small sprite-animated arcade game: walk the hunter around, watch him sit down when idle."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "sprite", "animation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sealhunter = "sealhunter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sealhunter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
