[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clmm-math"
version = "0.1.0"
description = "Integer fixed-point math for concentrated-liquidity market makers: ticks, sqrt prices, liquidity and swap steps"
requires-python = ">=3.10"
dependencies = []
keywords = ["amm", "clmm", "concentrated liquidity", "fixed point", "q64.64", "swap", "tick math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["clmm_math"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
