[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clubsim"
version = "1.0.0"
description = "Simulate a day at a computer club from an event log and report revenue and table usage"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "event log", "scheduling", "billing", "computer club"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
clubsim = "clubsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clubsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
