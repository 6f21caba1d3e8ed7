[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suikit"
version = "0.1.0"
description = "Client for the Sui JSON-RPC API with ed25519 key derivation, addresses, faucet requests and websocket subscriptions"
requires-python = ">=3.10"
keywords = ["sui", "blockchain", "json-rpc", "ed25519", "wallet", "websocket"]
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
dependencies = [
    "httpx",
    "cryptography",
    "websocket-client",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["suikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
