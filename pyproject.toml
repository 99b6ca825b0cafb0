[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xiangqi"
version = "0.1.0"
description = "Chinese chess (xiangqi) window with menus, a board model and room-status networking"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["xiangqi", "chinese chess", "board game", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
xiangqi = "xiangqi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["xiangqi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
