[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dayslots"
version = "0.1.0"
description = "Plan a day in nine two-hour slots, record what was done, compare the two and time focused work."
requires-python = ">=3.10"
dependencies = []
keywords = ["planner", "schedule", "time management", "focus timer", "reminder"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dayslots = "dayslots.cli:main"

[tool.setuptools.packages.find]
include = ["dayslots*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
