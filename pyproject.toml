[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twitterusers"
version = "0.1.0"
description = "Client and command line tool for the Twitter v2 user endpoints: lookups, followers, following and timelines"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["twitter", "api", "v2", "users", "followers", "following", "timeline", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
twitterusers = "twitterusers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["twitterusers"]

[tool.pytest.ini_options]
addopts = "-ra"
