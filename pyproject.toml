[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pirateocean"
version = "0.1.0"
description = "Ships, pirates and treasure kept in balanced AVL trees"
requires-python = ">=3.10"
keywords = ["avl", "balanced-tree", "data-structures", "ordered-map", "simulation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pirateocean"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
