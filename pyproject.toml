[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "escalonador"
version = "0.1.0"
description = "Credit-based round-robin process scheduler simulator with blocking I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "operating-system", "simulation", "round-robin", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
escalonador = "escalonador.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["escalonador"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
