[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cvforge"
version = "0.3.0"
description = "Résumé profile data model, date and icon helpers, and Redis-backed caching and rate limiting."
requires-python = ">=3.10"
keywords = ["resume", "cv", "profile", "dates", "redis", "cache", "rate-limit"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
    "Framework :: AsyncIO",
]
dependencies = [
    "redis>=5.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
]

[tool.hatch.build.targets.wheel]
packages = ["cvforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
