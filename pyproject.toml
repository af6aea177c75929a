[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfsnake"
version = "0.1.0"
description = "A mouse-steered snake arcade game with coloured fruit, an AI mode and a settings screen"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["snake", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sfsnake = "sfsnake.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sfsnake"]

[tool.pytest.ini_options]
addopts = "-ra"
