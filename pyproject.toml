[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unisecretary"
version = "0.1.0"
description = "A small university secretary: students, professors, courses, semesters, grades and graduation checks kept in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["university", "secretary", "students", "courses", "grades", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unisecretary = "unisecretary.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["unisecretary"]

[tool.pytest.ini_options]
addopts = "-ra"
