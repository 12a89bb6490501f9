[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fswatchkit"
version = "0.1.0"
description = "Code-point-level Unicode conversion between UTF-8, UTF-16, UTF-32, Latin-1, wide characters and the locale's ANSI encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "utf-8", "utf-16", "utf-32", "latin-1", "codec", "encoding"]
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
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fswatchkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
