[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "membership-rlwe"
version = "0.1.0"
description = "Building blocks for a private membership protocol: bit truncation, bucket ids, identifier hashing and value encryption"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["private membership", "bucket id", "aes-ctr", "oprf", "cryptography"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["membership_rlwe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
