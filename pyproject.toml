[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fatamorgana"
version = "1.0.0"
description = "Domain models and request helpers for an order, wallet and group-buy web service"
requires-python = ">=3.10"
dependencies = [
    "bcrypt",
]
keywords = ["orders", "wallet", "group-buy", "leaderboard", "rate-limit", "cors", "pagination"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
    "freezegun",
]

[tool.hatch.build.targets.wheel]
packages = ["fatamorgana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
