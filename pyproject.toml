[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icelink"
version = "0.1.0"
description = "Socket-free building blocks for Interactive Connectivity Establishment: candidates, pair priorities, STUN attributes and 1:1 NAT IP mapping"
requires-python = ">=3.10"
dependencies = []
keywords = ["ice", "stun", "nat", "candidate", "webrtc", "networking"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["icelink"]

[tool.pytest.ini_options]
addopts = "-ra"
