[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strmem"
version = "0.1.0"
description = "Byte-buffer and string helpers with C library semantics: memset, strlcpy, strnstr, atoi, split and friends."
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "memory", "bytes", "strlcpy", "atoi", "split"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["strmem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
