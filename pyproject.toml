[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daylab"
version = "0.1.0"
description = "Image filters, colour generators, table and video list models, and a back-key event filter"
requires-python = ">=3.10"
keywords = ["image", "filters", "color", "model", "xml"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["daylab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
