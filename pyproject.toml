[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funcurry"
version = "0.1.0"
description = "Currying, binding, adapting and lazy-argument helpers for Python callables, plus small iterator utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["curry", "functional", "partial", "bind", "lazy", "iterator", "thunk"]
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
packages = ["funcurry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
