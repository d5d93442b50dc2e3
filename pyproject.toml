[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xdccget"
version = "1.1.0"
description = "Building blocks for XDCC downloads: configuration, command-line parsing, progress display, MD5 checksums and mIRC colour codes."
requires-python = ">=3.10"
dependencies = []
keywords = ["irc", "xdcc", "dcc", "download", "mirc", "checksum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: File Sharing",
    "Topic :: Communications :: Chat :: Internet Relay Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xdccget"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
