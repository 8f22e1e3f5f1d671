[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codekata"
version = "0.1.0"
description = "Classic algorithm exercises on arrays, strings, numbers, linked lists and binary trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "exercises", "linked-list", "binary-tree", "interview"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codekata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
