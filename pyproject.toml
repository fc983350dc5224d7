[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numquant"
version = "0.2.0"
description = "Quantize numbers to a smaller range to save bandwidth or memory, and back again."
requires-python = ">=3.10"
dependencies = []
keywords = ["numeric", "quantization", "compression", "networking"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["numquant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
