[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcskit"
version = "0.2.6"
description = "Building blocks for a cloud-storage shell: option parsing, a hash table, lenient JSON, error messages, local file helpers and a write cache"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "hashtable", "argument-parsing", "filesystem", "cache", "cloud-storage"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pcskit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
