[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlesim"
version = "0.1.0"
description = "Two-dimensional particle simulation with gravity, friction, wall bounces and disc collisions"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "simulation", "particles", "collision", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
particlesim = "particlesim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["particlesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
