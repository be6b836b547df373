[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robowarehouse"
version = "0.1.0"
description = "Step-by-step simulation of robots fetching payloads in a small automated warehouse"
requires-python = ">=3.10"
keywords = ["simulation", "robots", "warehouse", "path-finding", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
robowarehouse = "robowarehouse.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["robowarehouse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
