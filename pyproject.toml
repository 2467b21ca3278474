[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jdis"
version = "1.0.0"
description = "Jaccard distance between the word sets of text files, with a separate-chaining hash table and a holdall container"
requires-python = ">=3.10"
dependencies = []
keywords = ["jaccard", "distance", "text", "similarity", "hashtable"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jdis = "jdis.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jdis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
