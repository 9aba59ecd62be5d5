[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weatherup"
version = "0.1.0"
description = "Weekly weather forecast and estimated energy page rendered from a JSON weather API"
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "forecast", "energy", "html"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weatherup = "weatherup.home:main"

[tool.hatch.build.targets.wheel]
packages = ["weatherup"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
