[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parallab"
version = "0.1.0"
description = "Small concurrency building blocks: a running maximum, stop tokens, a ticket office, a thread pool, coroutine tasks, async file copying, a bitonic sorting network, Gaussian kernel weights, UDP audio streaming and webcam packet framing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threading",
    "asyncio",
    "coroutines",
    "thread-pool",
    "stop-token",
    "bitonic-sort",
    "gaussian-kernel",
    "udp",
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
parallab-atomic-max = "parallab.atomic_max:main"
parallab-stop = "parallab.stop_control:main"
parallab-tickets = "parallab.ticket_office:main"
parallab-task = "parallab.coro_task:main"
parallab-chapters = "parallab.chapters:main"
parallab-await = "parallab.awaiting:main"
parallab-compute = "parallab.compute:main"
parallab-copy = "parallab.async_file:main"
parallab-bitonic = "parallab.bitonic:main"
parallab-radio = "parallab.radio:main"

[tool.hatch.build.targets.wheel]
packages = ["parallab"]

[tool.hatch.build.targets.sdist]
include = ["parallab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
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
