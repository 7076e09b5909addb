[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "imglab"
version = "0.1.0"
description = "Classic image-processing operations: point transforms, histograms, noise, smoothing, morphology and edge detection"
requires-python = ">=3.10"
dependencies = [
    "numpy>=1.23",
    "pillow>=9.0",
]
keywords = [
    "image processing",
    "histogram",
    "edge detection",
    "sobel",
    "prewitt",
    "laplace",
    "median filter",
    "morphology",
    "salt and pepper",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
imglab = "imglab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["imglab"]

[tool.hatch.build.targets.sdist]
include = [
    "imglab",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
