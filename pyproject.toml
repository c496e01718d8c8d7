[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sboxtables"
version = "0.1.0"
description = "Difference, linear and boomerang tables for cryptographic S-boxes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "s-box",
    "cryptanalysis",
    "ddt",
    "lat",
    "fbct",
    "fbdt",
    "boomerang",
    "block-cipher",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sboxtables = "sboxtables.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sboxtables"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
