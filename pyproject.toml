[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlkeeper"
version = "0.1.0"
description = "Small manager for a named SQLite connection: open, execute, create and drop tables, delete database files."
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "database", "tables", "connection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
sqlkeeper-demo = "sqlkeeper.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sqlkeeper"]

[tool.pytest.ini_options]
addopts = "-ra"
