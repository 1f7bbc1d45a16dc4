[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixeltoys"
version = "1.0.0"
description = "Small graphical toys: a warp-speed starfield and a grid-based snake game."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["pygame", "starfield", "snake", "game", "toy"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest"]

[project.scripts]
pixeltoys-starfield = "pixeltoys.starfield:main"
pixeltoys-snake = "pixeltoys.snake_game:main"

[tool.hatch.build.targets.wheel]
packages = ["pixeltoys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
