[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "jugsearch"
version = "0.1.0"
description = "Uninformed and informed graph search strategies applied to the water-jug puzzle"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "search",
    "a-star",
    "breadth-first",
    "depth-first",
    "iterative-deepening",
    "water-jug",
    "puzzle",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jugsearch = "jugsearch.cli:main"

[tool.setuptools]
packages = ["jugsearch"]

[tool.pytest.ini_options]
addopts = "-ra"
