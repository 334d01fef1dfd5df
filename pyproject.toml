[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ieeemath"
version = "0.1.0"
description = "IEEE 754 double-precision math functions computed on the bits of the double, in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "ieee754", "floating-point", "libm", "erf", "expm1", "log1p"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ieeemath"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
