[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rltnotify"
version = "0.1.0"
description = "In-memory real-time notification service with long-polling HTTP endpoints"
requires-python = ">=3.10"
keywords = ["notifications", "long-polling", "pubsub", "aiohttp", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
rltnotify = "rltnotify.server:main"

[tool.hatch.build.targets.wheel]
packages = ["rltnotify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
