[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volesim"
version = "0.1.0"
description = "An interactive simulator for a small 8-bit machine with 16 registers and 256 memory cells"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulator", "emulator", "machine language", "cpu", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
volesim = "volesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["volesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
