[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acrotester"
version = "0.1.0"
description = "Host-side helpers for a device programmer tester: packet framing, flow and spec configuration files, site mapping and view layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["tester", "programmer", "packet-framing", "configuration", "test-flow"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["acrotester"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
