[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soltoolkit"
version = "0.1.0"
description = "Solana encoding helpers, polled HTTP JSON-RPC clients and Shadow Drive account tools"
requires-python = ">=3.10"
keywords = ["solana", "rpc", "json-rpc", "base58", "base64", "shadow-drive"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["soltoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
