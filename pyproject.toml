[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "awaitkit"
version = "0.1.0"
description = "Small asyncio helpers for running awaitables in parallel and under deadlines, with simple thread synchronisation primitives"
requires-python = ">=3.11"
dependencies = []
keywords = ["asyncio", "timeout", "parallel", "channel", "concurrency", "spinlock"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
awaitkit-demo = "awaitkit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["awaitkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
