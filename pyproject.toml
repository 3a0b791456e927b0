[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridkit"
version = "0.1.0"
description = "Building blocks for game-world servers: object registries, typed grid cells, locked queues, query results and queued database queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["grid", "registry", "game server", "queue", "visitor", "linked list"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
