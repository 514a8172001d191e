[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datalabs"
version = "0.1.0"
description = "Small console programs for long float division, sparse matrix multiplication and array/list stacks, plus a validated car record type"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data structures",
    "big numbers",
    "sparse matrix",
    "stack",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datalabs-bigfloat = "datalabs.bigfloat_cli:main"
datalabs-sparse = "datalabs.sparse_app:main"
datalabs-stacks = "datalabs.stack_app:main"

[tool.hatch.build.targets.wheel]
packages = ["datalabs"]

[tool.hatch.build.targets.sdist]
include = ["datalabs", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
