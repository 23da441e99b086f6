[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoteldb"
version = "0.1.0"
description = "A small file-backed hotel and room database with an interactive command shell"
requires-python = ">=3.10"
keywords = ["database", "fixed-length records", "index", "hotel", "shell"]
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
    "Topic :: Database :: Database Engines/Servers",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hoteldb = "hoteldb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hoteldb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
