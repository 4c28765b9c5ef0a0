[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledmatrix"
version = "0.1.0"
description = "Virtual LED matrix panel coordinate mapping, framebuffer effects, flocking boids and maze generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "matrix", "hub75", "panel", "framebuffer", "effects", "boids", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ledmatrix"]

[tool.pytest.ini_options]
addopts = "-ra"
