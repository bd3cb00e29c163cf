[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpumarks"
version = "0.1.0"
description = "Dhrystone and the CoreMark workloads in pure Python, with self-checking results"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "coremark", "dhrystone", "crc", "cpu", "performance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpumarks-dhrystone = "cpumarks.dhrystone_main:main"

[tool.hatch.build.targets.wheel]
packages = ["cpumarks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
