[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvegroup"
version = "0.1.0"
description = "Pure Python arithmetic on Curve25519: the prime field, Edwards points, basepoint tables, multiscalar multiplication and the Montgomery ladder"
requires-python = ">=3.10"
dependencies = []
keywords = ["curve25519", "ed25519", "x25519", "edwards", "montgomery", "elliptic-curve", "elligator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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

[tool.hatch.build.targets.wheel]
packages = ["curvegroup"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
