[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "autocompany"
version = "0.1.0"
description = "A small line-command front-end for browsing, filtering and editing the tables of a company SQLite database"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "database", "front-end", "tables", "company"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autocompany = "autocompany.app:main"

[tool.setuptools.packages.find]
include = ["autocompany*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
