[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "0.1.0"
description = "Classic algorithm drills: bracket matching, postfix evaluation, binary search, sorting and greedy exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "binary-search",
    "sorting",
    "stack",
    "greedy",
    "bipartite-matching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbook-brackets = "drillbook.brackets:main"
drillbook-postfix = "drillbook.postfix:main"
drillbook-search = "drillbook.searching:main"
drillbook-swaps = "drillbook.swaps:main"
drillbook-cover = "drillbook.cover:main"
drillbook-casino = "drillbook.casino:main"
drillbook-distinct = "drillbook.distinct:main"
drillbook-ferris = "drillbook.ferris:main"
drillbook-tilt = "drillbook.tilt:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
