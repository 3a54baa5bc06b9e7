[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quip-protocol"
version = "0.1.0"
description = "BLAKE3 and ChaCha8 primitives, hybrid transaction identity helpers and chain-spec tooling for the Quip protocol."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "blake3",
    "chacha8",
    "rng",
    "ising",
    "blockchain",
    "chain-spec",
    "account-id",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quip-node = "quip_protocol.command:main"

[tool.hatch.build.targets.wheel]
packages = ["quip_protocol"]

[tool.hatch.build.targets.sdist]
include = ["quip_protocol", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
