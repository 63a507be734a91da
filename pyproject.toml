[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aisutil"
version = "0.1.0"
description = "Small utilities: string helpers, tokenising, wildcard masks, UTF-8 checks, timestamps, peak counters, SHA-1 digests and socket options"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "strings", "tokens", "wildcard", "utf-8", "sha1", "sockets"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["aisutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
