[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nyquest"
version = "0.1.1"
description = "HTTP client facade that delegates to a registered backend, with blocking and asyncio interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "backend", "facade", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "pytest-asyncio>=0.21",
]

[tool.hatch.build.targets.wheel]
packages = ["nyquest"]

[tool.pytest.ini_options]
addopts = "-ra"
