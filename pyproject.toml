[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "belanja"
version = "0.1.0"
description = "A small terminal shop: AVL-backed inventory, user accounts, shopping cart and route-based shipping estimates."
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "inventory", "cart", "point-of-sale", "avl-tree", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
belanja = "belanja.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["belanja"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
