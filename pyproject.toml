[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cptoolkit"
version = "0.1.0"
description = "Algorithms, data structures and test-data helpers for competitive programming"
requires-python = ">=3.10"
keywords = ["competitive-programming", "algorithms", "data-structures", "number-theory", "stress-testing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
cptoolkit-gen = "cptoolkit.generators:main"

[tool.hatch.build.targets.wheel]
packages = ["cptoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
