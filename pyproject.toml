[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ncidissect"
version = "0.1.0"
description = "Decoder for NFC Controller Interface (NCI) packets"
requires-python = ">=3.10"
dependencies = []
keywords = ["nfc", "nci", "dissector", "protocol", "packet"]
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
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ncidissect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
