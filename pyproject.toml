[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clefiacipher"
version = "0.1.0"
description = "The CLEFIA 128-bit block cipher with 128, 192 and 256-bit keys, plus a hex file encryption command"
requires-python = ">=3.10"
dependencies = []
keywords = ["clefia", "block cipher", "encryption", "feistel", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clefiacipher = "clefiacipher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clefiacipher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
