[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lxdkit"
version = "1.0.1"
description = "Provision LXD containers with common tools through the lxc client, plus an application error catalogue"
requires-python = ">=3.10"
dependencies = []
keywords = ["lxd", "lxc", "containers", "provisioning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lxdkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
