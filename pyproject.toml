[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hufzip"
version = "0.1.0"
description = "Compress and decompress files with Huffman coding"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "decompression", "entropy-coding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hufzip = "hufzip.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hufzip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
