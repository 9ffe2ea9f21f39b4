[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morphdict"
version = "0.1.0"
description = "Building blocks for dictionary-based morphological analysis: packed dictionary trees, wildcard scanning, capitalization schemes and Ukrainian grammar tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["morphology", "lemmatization", "dictionary", "ukrainian", "linguistics", "windows-1251"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Ukrainian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["morphdict"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
