[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "folderscan"
version = "0.1.0"
description = "List the entries of a folder, optionally print file contents, and read directories as seekable streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["directory", "listing", "scandir", "versionsort", "strverscmp", "files"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
folderscan = "folderscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["folderscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
