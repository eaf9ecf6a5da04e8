[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tapschema"
version = "0.1.0"
description = "Read MySQL table schemas, try ALTER statements on scratch copies, and convert schemas to Avro record schemas"
requires-python = ">=3.10"
dependencies = []
keywords = ["mysql", "avro", "schema", "alter-table", "information-schema"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tapschema"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
