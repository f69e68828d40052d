[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listbench"
version = "0.1.0"
description = "Benchmark a sorted linked list under serial, mutex and read-write-lock workloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "linked list", "threads", "mutex", "read-write lock", "concurrency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
listbench = "listbench.benchmark:main"
listbench-unsorted = "listbench.unsorted:main"

[tool.hatch.build.targets.wheel]
packages = ["listbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
