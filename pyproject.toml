[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qsortbench"
version = "1.0.0"
description = "Iterative median-of-three quicksort with insertion-sort cutoff and a fixed 2048-integer input dataset"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "quicksort", "sorting", "insertion sort"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["qsortbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
