[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transforma"
version = "0.1.0"
description = "Homogeneous 2D transformations, window-to-viewport mapping, oblique 3D projection and small animation models"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "transformations", "viewport", "projection", "geometry", "animation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transforma-fill = "transforma.random_fill:main"

[tool.hatch.build.targets.wheel]
packages = ["transforma"]

[tool.pytest.ini_options]
addopts = "-ra"
