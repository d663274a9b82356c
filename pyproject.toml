[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arpsend"
version = "0.1.0"
description = "Build and parse Ethernet and ARP headers, with MAC and IPv4 address types"
requires-python = ">=3.10"
dependencies = []
keywords = ["arp", "ethernet", "mac", "ipv4", "packet", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arpsend"]

[tool.pytest.ini_options]
addopts = "-ra"
