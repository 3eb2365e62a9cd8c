[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoleparse"
version = "0.1.0"
description = "A small command-line argument parser with registered long and short options and help output."
requires-python = ">=3.10"
dependencies = []
keywords = ["command-line", "arguments", "parser", "cli", "options"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consoleparse-demo = "consoleparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["consoleparse"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
