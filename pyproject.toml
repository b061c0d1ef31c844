[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshprops"
version = "0.1.0"
description = "Typed accessors and wire-format codecs for Envoy/Istio proxy properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["envoy", "istio", "proxy-wasm", "properties", "service-mesh", "attributes"]
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
    "Topic :: Internet :: Proxy Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshprops"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
