[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osinfo"
version = "1.0.0"
description = "Detect the operating system type and version."
requires-python = ">=3.10"
dependencies = []
keywords = ["os", "osinfo", "os_variant", "os_version", "os_codename", "os-release"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Environment :: Console",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osinfo = "osinfo.detect:main"

[tool.hatch.build.targets.wheel]
packages = ["osinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
