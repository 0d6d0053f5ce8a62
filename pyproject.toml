[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dlnet"
version = "0.1.0"
description = "Support utilities for network programs: codecs, SHA-1, ring buffer, timers, task queues and file logging"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "networking",
    "ring buffer",
    "timers",
    "task queue",
    "base64",
    "sha1",
    "url encoding",
    "hexdump",
    "logging",
    "log rotation",
]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dlnet"]

[tool.pytest.ini_options]
addopts = "-ra"
