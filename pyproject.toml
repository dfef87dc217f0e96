[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgstatlabs"
version = "0.1.0"
description = "Small caches, stream helpers, option parsers and in-memory SNMP-style statistics tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["snmp", "mib", "cache", "lru", "getopt", "monitoring", "postgresql"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pgstatlabs-blockcache = "pgstatlabs.blockcache:main"
pgstatlabs-fmgmt = "pgstatlabs.myio:main"
pgstatlabs-testopt = "pgstatlabs.testopt:main"
pgstatlabs-testoptlong = "pgstatlabs.testoptlong:main"

[tool.hatch.build.targets.wheel]
packages = ["pgstatlabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
