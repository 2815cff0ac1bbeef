[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reukocyte"
version = "0.0.1"
description = "Line-based layout checks for Ruby source with iterative autocorrection"
requires-python = ">=3.10"
dependencies = []
keywords = ["ruby", "linter", "style", "autocorrect", "layout", "whitespace"]
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
    "Topic :: Software Development :: Quality Assurance",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reukocyte"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
