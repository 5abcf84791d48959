[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotelkeeper"
version = "0.1.0"
description = "Hotel guest records, room stays and bookable resources such as spa slots"
requires-python = ">=3.10"
dependencies = []
keywords = ["hotel", "guests", "rooms", "reservations", "loyalty", "scheduling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hotelkeeper = "hotelkeeper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hotelkeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
