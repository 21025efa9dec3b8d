[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsndn"
version = "0.1.0"
description = "Named-data file storage: segmented file blocks, inode trees and an in-process data node service"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "named data networking", "ndn", "storage", "datanode"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fsndn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
