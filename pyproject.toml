[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moneyboard"
version = "0.1.0"
description = "Personal finance calculations: transactions, contracts, goals, wealth history and monthly extrapolation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "finance",
    "budget",
    "accounting",
    "wealth",
    "savings",
    "extrapolation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["moneyboard"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
