[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bambi"
version = "0.1.0"
description = "Reader for Illumina filter files and SAM/BAM CIGAR and binning helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["illumina", "sequencing", "filter", "bam", "sam", "cigar", "bioinformatics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bambi"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
