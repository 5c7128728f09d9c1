[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashboggle"
version = "0.1.0"
description = "A string hash, an open-addressing hash table with linear and double-hash probing, and a straight-line Boggle word finder"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "hash table", "double hashing", "open addressing", "boggle", "mt19937"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
str-hash = "hashboggle.strhash:main"
ht-demo = "hashboggle.htdemo:main"
boggle-driver = "hashboggle.boggle:main"

[tool.hatch.build.targets.wheel]
packages = ["hashboggle"]

[tool.pytest.ini_options]
addopts = "-ra"
