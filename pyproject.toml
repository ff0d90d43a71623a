[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "centy"
version = "0.1.3"
description = "Read and maintain local-first issues and docs stored as plain files in a project's .centy directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["issues", "issue-tracker", "documentation", "local-first", "markdown"]
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
    "Topic :: Software Development :: Bug Tracking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["centy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
