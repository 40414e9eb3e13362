[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbench"
version = "0.1.0"
description = "Task lifecycle checking and performance measurement for small computational tasks"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "task", "performance", "testing", "pipeline", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskbench-samples = "taskbench.samples:main"

[tool.hatch.build.targets.wheel]
packages = ["taskbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
