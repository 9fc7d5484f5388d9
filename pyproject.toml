[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mealsync"
version = "0.1.0"
description = "Service layer for scheduling office meal events, menus, requests, comments and notifications"
requires-python = ">=3.10"
dependencies = []
keywords = ["meals", "scheduling", "menu", "office", "services"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mealsync"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
