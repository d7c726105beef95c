[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dshell"
version = "0.1.0"
description = "A plugin-based desktop shell framework: applets, containments, panels, dock settings and an on-screen display panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["desktop", "shell", "panel", "dock", "applet", "plugin", "osd"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dshell = "dshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["dshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
