[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dddplayer"
version = "0.4.1"
description = "Domain-driven design diagram building blocks: Graphviz DOT rendering, radix trees and relation graphs"
requires-python = ">=3.10"
keywords = ["ddd", "domain-driven-design", "graphviz", "dot", "architecture", "diagram"]
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
    "Topic :: Software Development :: Documentation",
]
dependencies = [
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dddplayer = "dddplayer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dddplayer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
