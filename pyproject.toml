[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suikit"
version = "0.1.0"
description = "Small client toolkit for the Sui JSON-RPC API: balances, checkpoints, transaction blocks, Ed25519 keys and SUI transfers."
requires-python = ">=3.10"
keywords = ["sui", "blockchain", "json-rpc", "ed25519", "wallet"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests>=2.28",
    "cryptography>=41",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["suikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
