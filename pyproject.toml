[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic backtracking, divide-and-conquer and shortest-path algorithms with small command-line front ends"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "backtracking",
    "divide and conquer",
    "graph coloring",
    "hamiltonian cycle",
    "n-queens",
    "optimal merge",
    "shortest paths",
    "subset sum",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-coloring = "algokit.coloring:main"
algokit-hamiltonian = "algokit.hamiltonian:main"
algokit-merge = "algokit.merging:main"
algokit-minmax = "algokit.minmax:main"
algokit-queens = "algokit.queens:main"
algokit-all-pairs = "algokit.shortest_paths:all_pairs_main"
algokit-single-source = "algokit.shortest_paths:single_source_main"
algokit-subsets = "algokit.subsets:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
