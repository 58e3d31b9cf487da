[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinystat"
version = "0.1.0"
description = "Small descriptive statistics toolkit with text histograms and test-report helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "statistics",
    "percentiles",
    "quartiles",
    "outliers",
    "dispersion",
    "binning",
    "histogram",
]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinystat"]

[tool.pytest.ini_options]
addopts = "-ra"
