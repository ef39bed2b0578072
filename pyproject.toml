[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixatar"
version = "0.1.0"
description = "Generate pixel art avatar images from the bits of a username"
requires-python = ">=3.10"
dependencies = []
keywords = ["avatar", "pixel-art", "png", "generator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pixatar = "pixatar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixatar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
