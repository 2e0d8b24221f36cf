[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "netchannel"
version = "0.1.0"
description = "Small TCP and UDP multicast channels with a uniform start/send/receive/stop interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["socket", "tcp", "udp", "multicast", "networking", "channel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[project.scripts]
netchannel-client = "netchannel.client:main"
netchannel-server = "netchannel.server:main"

[tool.setuptools.packages.find]
include = ["netchannel*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
