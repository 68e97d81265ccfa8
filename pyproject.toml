[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huffcode"
version = "0.1.0"
description = "Huffman coding compressor and decompressor for files and byte strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "entropy-coding", "prefix-code"]
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
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
huffcode = "huffcode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huffcode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
