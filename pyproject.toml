[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noxmlserial"
version = "0.1.0"
description = "An in-memory node tree with an XML serializer supporting CDATA sections and CCSID-based encodings."
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "serializer", "tree", "cdata", "ccsid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["noxmlserial"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
