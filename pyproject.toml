[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ptenchik_calc"
version = "1.0.0"
description = "Interactive menu-driven terminal calculator for two-operand arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "terminal", "interactive", "arithmetic"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ptenchik-calc = "ptenchik_calc.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["ptenchik_calc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
