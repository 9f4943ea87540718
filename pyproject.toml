[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "englishstem"
version = "0.1.0"
description = "English token filters: possessive stripping and a Krovetz-style stemmer"
requires-python = ">=3.10"
dependencies = []
keywords = ["english", "stemmer", "kstem", "possessive", "nlp", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["englishstem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
