[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinytraits"
version = "0.1.0"
description = "Small trait-style mixins for equality, hashing, ordering, formatting, conversion and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["traits", "mixins", "abc", "ordering", "equality", "hashing", "conversion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinytraits-examples = "tinytraits.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["tinytraits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
