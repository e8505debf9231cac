[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "explorerkit"
version = "0.1.0"
description = "Small text utilities: delimited-text streams, mustache-style template building blocks, and formatted error reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "delimited", "mustache", "templates", "formatting", "text"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["explorerkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
