[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dupefind"
version = "0.1.0"
description = "Find duplicate files in a folder by SHA-256 and optionally move the extra copies to the trash"
requires-python = ">=3.10"
dependencies = []
keywords = ["duplicates", "files", "sha256", "cleanup", "deduplication"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dupefind = "dupefind.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dupefind"]

[tool.pytest.ini_options]
addopts = "-ra"
