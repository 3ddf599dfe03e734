[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftlib"
version = "0.1.0"
description = "Small string, memory, linked-list, printf-style formatting and line-reading utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "printf", "linked list", "line reader", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
