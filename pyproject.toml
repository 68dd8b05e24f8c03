[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bnfgen"
version = "0.1.0"
description = "Generate random strings from a BNF-style grammar"
requires-python = ">=3.10"
dependencies = []
keywords = ["bnf", "ebnf", "grammar", "generator", "fuzzing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bnfgen = "bnfgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bnfgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
