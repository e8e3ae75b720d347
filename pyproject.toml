[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vecmath3"
version = "0.1.0"
description = "A small 3D float vector type with component-wise arithmetic in single precision."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["vector", "3d", "math", "linear-algebra", "float32"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vecmath3"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
