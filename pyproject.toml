[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "extender"
version = "0.1.0"
description = "Option and Result types, dict and list helpers, and value-guarding locks"
requires-python = ">=3.10"
dependencies = []
keywords = ["option", "result", "functional", "mutex", "rwlock", "utilities"]
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
packages = ["extender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
