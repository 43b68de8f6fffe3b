[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paxcore"
version = "0.1.0"
description = "Small core utilities: Unicode codecs, byte strings and buffers, a clock, terminal modes, threads and sockets."
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "utf-8", "utf-16", "utf-32", "buffer", "socket", "terminal", "threading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["paxcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
