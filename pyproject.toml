[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcserve"
version = "0.1.0"
description = "A small threaded HTTP/1.1 server with a calculator endpoint, static files and a stats page"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "calculator", "static-files", "threaded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calcserve = "calcserve.server:main"

[tool.hatch.build.targets.wheel]
packages = ["calcserve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
