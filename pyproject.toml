[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feeless"
version = "0.1.0"
description = "Nano cryptocurrency keys, addresses, signatures and blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["nano", "cryptocurrency", "ed25519", "blake2b", "address", "signature"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
feeless = "feeless.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["feeless"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
