[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sanjiplot"
version = "0.1.0"
description = "Small 2D plotting library for line, dot and quiver plots rendered to images"
requires-python = ">=3.10"
keywords = ["plotting", "visualization", "quiver", "line plot", "colormap", "ticks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sanjiplot-examples = "sanjiplot.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["sanjiplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
