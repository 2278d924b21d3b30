[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reqkit"
version = "0.1.0"
description = "Building blocks for HTTP clients: request options, header and cookie parsing, URL escaping and a resizable thread pool."
requires-python = ">=3.10"
keywords = ["http", "headers", "cookies", "query-string", "threadpool", "client"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reqkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
