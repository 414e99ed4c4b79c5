[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathkit"
version = "0.1.0"
description = "Filesystem path inspection, status reporting, directory walking and small file utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "path", "directory", "status", "symlink", "walk"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathkit-status = "pathkit.status:main"
pathkit-error-demo = "pathkit.error_demo:main"
pathkit-path-info = "pathkit.pathinfo:main"
pathkit-stems = "pathkit.stems:main"
pathkit-ls = "pathkit.listing:main"
pathkit-walk = "pathkit.walk:main"
pathkit-path-table = "pathkit.path_table:main"
pathkit-mbcopy = "pathkit.mbcopy:main"

[tool.hatch.build.targets.wheel]
packages = ["pathkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
