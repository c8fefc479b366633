[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyhttp"
version = "0.1.0"
description = "HTTP/1.1 building blocks on raw sockets: an incremental request parser, a case-insensitive header map and a state-checked response writer"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "http/1.1", "parser", "tcp", "udp", "chunked"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyhttp-tcplistener = "tinyhttp.tcplistener:main"
tinyhttp-udpsender = "tinyhttp.udpsender:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyhttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
