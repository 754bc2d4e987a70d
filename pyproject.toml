[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "savplayer"
version = "0.1.0"
description = "A small desktop MP3 player with a draggable control panel, track list and colour themes"
requires-python = ">=3.10"
keywords = ["mp3", "music", "player", "pygame", "audio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players :: MP3",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
savplayer = "savplayer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["savplayer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
