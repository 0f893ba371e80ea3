[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "topicnames"
version = "0.1.0"
description = "Validation of topic names with the reason and position of any fault"
requires-python = ">=3.10"
dependencies = []
keywords = ["topic", "name", "validation", "robotics", "middleware"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["topicnames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
