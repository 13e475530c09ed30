[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timehold"
version = "0.1.0"
description = "A timeline of the hours of the day with a dial at the current time, drawn in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["clock", "timeline", "time", "hours", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
timehold = "timehold.app:main"

[tool.hatch.build.targets.wheel]
packages = ["timehold"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
