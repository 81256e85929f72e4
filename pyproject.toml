[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quilldelta"
version = "1.1.1"
description = "The Quill editor Delta format: build, slice, compose and invert rich-text change sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["quill", "delta", "rich-text", "operational-transform", "editor"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Editors :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quilldelta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
