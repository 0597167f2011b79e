[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monkeylang"
version = "0.1.0"
description = "Tokens and lexer for the Monkey programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["monkey", "interpreter", "lexer", "tokenizer"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monkeylang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
