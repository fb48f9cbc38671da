[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "navdecode"
version = "0.1.0"
description = "Decoders for GNSS/INS binary navigation packets and navigation math helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["gnss", "ins", "navigation", "packet", "decoder", "ned", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["navdecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
