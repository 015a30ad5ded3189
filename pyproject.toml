[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "payments_engine"
version = "0.1.0"
description = "A small payments engine that replays a CSV of transactions and reports client account balances."
requires-python = ">=3.10"
dependencies = []
keywords = ["payments", "transactions", "accounting", "csv", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
payments-engine = "payments_engine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["payments_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
