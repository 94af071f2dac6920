[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbook"
version = "0.1.0"
description = "Small, runnable examples of the classic software design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "gang of four",
    "examples",
    "teaching",
    "object oriented",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternbook-abstract-factory = "patternbook.abstract_factory:main"
patternbook-adapter = "patternbook.adapter:main"
patternbook-bridge = "patternbook.bridge:main"
patternbook-builder = "patternbook.builder:main"
patternbook-chain-of-responsibility = "patternbook.chain_of_responsibility:main"
patternbook-command = "patternbook.command:main"
patternbook-composite = "patternbook.composite:main"
patternbook-decorator = "patternbook.decorator:main"
patternbook-facade = "patternbook.facade:main"
patternbook-factory = "patternbook.factory:main"
patternbook-flyweight = "patternbook.flyweight:main"
patternbook-iterator = "patternbook.iterator:main"
patternbook-mediator = "patternbook.mediator:main"
patternbook-memento = "patternbook.memento:main"
patternbook-observer = "patternbook.observer:main"
patternbook-prototype = "patternbook.prototype:main"
patternbook-proxy = "patternbook.proxy:main"
patternbook-state = "patternbook.state:main"
patternbook-strategy = "patternbook.strategy:main"
patternbook-template = "patternbook.template:main"
patternbook-visitor = "patternbook.visitor:main"
patternbook-singleton-lock = "patternbook.singleton_lock:main"
patternbook-singleton-once = "patternbook.singleton_once:main"

[tool.hatch.build.targets.wheel]
packages = ["patternbook"]

[tool.hatch.build.targets.sdist]
include = ["patternbook", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
