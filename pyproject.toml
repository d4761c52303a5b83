[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerbench"
version = "0.1.0"
description = "Small experiments: 2D geometric algebra, Lua value types, a ring buffer, operation counting, traced lazy pipelines and JSON property files."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "experiments",
    "geometric-algebra",
    "circular-buffer",
    "instrumentation",
    "json",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerbench-ring = "tinkerbench.ring:main"
tinkerbench-instrumented = "tinkerbench.instrumented:main"
tinkerbench-points = "tinkerbench.points:main"
tinkerbench-pipeline = "tinkerbench.pipeline:main"
tinkerbench-properties = "tinkerbench.properties:main"
tinkerbench-joystick = "tinkerbench.joystick:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
