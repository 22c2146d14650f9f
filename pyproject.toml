[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typinganalyzer"
version = "0.0.1"
description = "Typing speed meter, focus-period timer and keyboard sound effects."
requires-python = ">=3.10"
dependencies = []
keywords = ["typing", "wpm", "cpm", "focus", "pomodoro", "keyboard", "sounds"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
typinganalyzer = "typinganalyzer.application:main"

[tool.hatch.build.targets.wheel]
packages = ["typinganalyzer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
