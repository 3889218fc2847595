[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "donhangkho"
version = "1.0.0"
description = "Interactive console tool for managing products, stock and customer orders"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "orders", "stock", "console", "products"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
donhangkho = "donhangkho.cli:main"
donhangkho-simple = "donhangkho.simple:main"

[tool.setuptools.packages.find]
include = ["donhangkho*"]

[tool.pytest.ini_options]
addopts = "-ra"
