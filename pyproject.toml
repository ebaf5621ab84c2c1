[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thinkbox"
version = "0.1.0"
description = "A toolbox of small patterns: concurrency helpers, design patterns, data structures, chunked uploads, a SQLite helper and Redis locks and sign-ins."
requires-python = ">=3.10"
dependencies = [
    "flask",
    "redis",
]
keywords = [
    "concurrency",
    "design-patterns",
    "priority-queue",
    "sqlite",
    "redis",
    "distributed-lock",
    "bitmap",
    "upload",
]
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
    "Framework :: Flask",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
thinkbox-permissions = "thinkbox.permissions:main"
thinkbox-upload = "thinkbox.uploader:main"
thinkbox-signin = "thinkbox.signin:main"

[tool.hatch.build.targets.wheel]
packages = ["thinkbox"]

[tool.hatch.build.targets.sdist]
include = ["thinkbox", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
