[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oiiashell"
version = "0.1.0"
description = "An interactive prompt that tokenizes shell command lines and shows the tokens, with a library for quote joining and dollar expansion"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "expansion", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oiiashell = "oiiashell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["oiiashell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
