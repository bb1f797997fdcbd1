[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clmmath"
version = "0.1.0"
description = "Exact integer math for concentrated-liquidity market makers: ticks, Q64.64 prices, liquidity and swap steps"
requires-python = ">=3.10"
dependencies = []
keywords = ["amm", "clmm", "concentrated liquidity", "fixed point", "tick math", "q64.64"]
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
packages = ["clmmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
