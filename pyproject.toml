[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcpplay"
version = "0.1.0"
description = "A small MCP server exposing a calculator over server-sent events, with a command-line toolkit"
requires-python = ">=3.10"
keywords = ["mcp", "model-context-protocol", "sse", "json-rpc", "calculator", "scaffolding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]
dependencies = [
    "aiohttp>=3.9",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.23",
]

[project.scripts]
mcpplay = "mcpplay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mcpplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
