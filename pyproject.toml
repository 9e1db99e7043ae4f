[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coffeetoken"
version = "0.0.1"
description = "An in-memory coffee loyalty token ledger with balances, allowances, account freezing and free-coffee rewards"
requires-python = ">=3.10"
dependencies = []
keywords = ["token", "loyalty", "ledger", "allowance", "coffee"]
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
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coffeetoken"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
