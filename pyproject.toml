[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keychain"
version = "0.1.0"
description = "Password-encrypted multi-network key storage with BIP32/BIP44 key derivation on secp256k1"
requires-python = ">=3.10"
keywords = ["keychain", "bip32", "bip44", "secp256k1", "wallet", "bitcoin", "ethereum", "chacha20-poly1305"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["keychain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
