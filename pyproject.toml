[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lstheme"
version = "0.1.0"
description = "Colour, icon and git-symbol themes for a directory listing, loaded from YAML"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["ls", "theme", "colors", "icons", "terminal", "yaml"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lstheme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
