[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qlemu"
version = "0.1.0"
description = "Sinclair QL emulator support: big-endian memory, extended screen patching, key codes, file headers and IP trap numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sinclair", "ql", "qdos", "emulator", "68000"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qlemu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
