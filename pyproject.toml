[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "babygit"
version = "0.1.0"
description = "A tiny version control tool that keeps commits, branches, a staging index and stashes under .babygit"
requires-python = ">=3.10"
dependencies = []
keywords = ["vcs", "version-control", "commit", "branch", "staging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
babygit = "babygit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["babygit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
