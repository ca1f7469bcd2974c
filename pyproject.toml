[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathtracer"
version = "0.1.0"
description = "A small physically based path tracer that renders sphere scenes to JPEG images"
requires-python = ">=3.10"
keywords = ["path tracing", "ray tracing", "rendering", "graphics", "monte carlo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pathtracer = "pathtracer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pathtracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
