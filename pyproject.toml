[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilisp"
version = "0.1.0"
description = "A tiny Lisp interpreter with a REPL and a bridge for calling Python functions from Lisp and Lisp functions from Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "repl", "embedding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: Lisp",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minilisp = "minilisp.repl:main"
minilisp-demo = "minilisp.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["minilisp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
