[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernelsim"
version = "0.1.0"
description = "Simulated kernel, CPU, memory and I/O modules that talk to each other over TCP with a small binary protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating-systems", "scheduler", "pcb", "sockets", "simulation", "distributed"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kernelsim-kernel = "kernelsim.kernel:main"
kernelsim-cpu = "kernelsim.cpu:main"
kernelsim-io = "kernelsim.io:main"
kernelsim-memoria = "kernelsim.memoria:main"

[tool.hatch.build.targets.wheel]
packages = ["kernelsim"]

[tool.pytest.ini_options]
addopts = "-ra"
