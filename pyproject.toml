[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ravenserver"
version = "0.1.0"
description = "Quazal PRUDP packet handling, RC4 and zlib helpers, and INI configuration reading for offline game services"
requires-python = ">=3.10"
dependencies = []
keywords = ["quazal", "prudp", "rc4", "checksum", "ini", "game-server"]
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ravenserver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
