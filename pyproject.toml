[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowkit"
version = "1.0.0"
description = "Configuration model, JSON section conversion and loader for Flow project files"
requires-python = ">=3.10"
keywords = ["flow", "blockchain", "configuration", "flow.json", "cadence"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["flowkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
