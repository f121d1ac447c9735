[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbmc"
version = "0.1.0"
description = "A small database management client: a B-tree of ordered keys, table schema types and a tkinter front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "b-tree", "index", "schema", "client", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dbmc = "dbmc.client:main"

[tool.hatch.build.targets.wheel]
packages = ["dbmc"]

[tool.pytest.ini_options]
addopts = "-ra"
