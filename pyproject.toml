[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainprims"
version = "0.1.0"
description = "Digests, HMAC, fixed-width integers, fixed-size hashes and hex codecs for blockchain tooling"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["ethereum", "sha256", "ripemd160", "hmac", "uint256", "hex", "hash"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chainprims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
