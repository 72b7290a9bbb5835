[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patsearch"
version = "0.1.0"
description = "Exact string-search algorithms (naive, Rabin-Karp, KMP, Boyer-Moore, Z-function, Aho-Corasick) with a timing harness"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "string search",
    "pattern matching",
    "kmp",
    "boyer-moore",
    "rabin-karp",
    "aho-corasick",
    "z-function",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patsearch-bench = "patsearch.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["patsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
