[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ttykit"
version = "0.1.0"
description = "Terminal utilities: pseudo-terminals, raw mode, locale checks, full writes and monotonic timestamps"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "pty", "termios", "locale", "timestamp"]
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
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ttykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
