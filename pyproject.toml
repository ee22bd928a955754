[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apidesign"
version = "0.1.0"
description = "Small, self-contained examples of API design idioms: stacks, data-driven commands, adapters, proxies, facades, factories, observers, singletons and timers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "api-design",
    "design-patterns",
    "adapter",
    "proxy",
    "facade",
    "factory",
    "observer",
    "singleton",
    "stack",
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
apidesign-stack = "apidesign.stacks:main"
apidesign-command-stack = "apidesign.command_stack:main"
apidesign-adapter = "apidesign.adapter:main"
apidesign-proxy = "apidesign.proxy:main"
apidesign-facade = "apidesign.facade:main"
apidesign-renderers = "apidesign.renderers:main"
apidesign-singleton = "apidesign.singleton:main"

[tool.hatch.build.targets.wheel]
packages = ["apidesign"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
