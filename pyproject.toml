[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ostoolkit"
version = "0.1.0"
description = "A terminal menu of small utilities: calculator, calendar, file tools, games and a view of launched processes."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "terminal",
    "menu",
    "calculator",
    "calendar",
    "file-tools",
    "games",
    "hangman",
    "processes",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ostoolkit = "ostoolkit.menu:main"
ostoolkit-intro = "ostoolkit.intro:main"
ostoolkit-calculator = "ostoolkit.calculator:main"
ostoolkit-calendar = "ostoolkit.yearcal:main"
ostoolkit-hangman = "ostoolkit.hangman:main"
ostoolkit-rps = "ostoolkit.rps:main"
ostoolkit-numberguess = "ostoolkit.numberguess:main"
ostoolkit-copy = "ostoolkit.filetools:copy_main"
ostoolkit-cut = "ostoolkit.filetools:cut_main"
ostoolkit-delete = "ostoolkit.filetools:delete_main"
ostoolkit-move = "ostoolkit.filetools:move_main"
ostoolkit-info = "ostoolkit.filetools:info_main"
ostoolkit-notepad = "ostoolkit.notepad:main"
ostoolkit-song = "ostoolkit.media:song_main"
ostoolkit-video = "ostoolkit.media:video_main"
ostoolkit-clock = "ostoolkit.media:clock_main"

[tool.hatch.build.targets.wheel]
packages = ["ostoolkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
