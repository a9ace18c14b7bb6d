[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sharemouse"
version = "0.1.0"
description = "Share one mouse between two side-by-side computers: virtual pointer tracking, a UDP event transport and ydotool replay"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["mouse", "sharing", "kvm", "udp", "ydotool"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
sharemouse = "sharemouse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sharemouse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
