[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sveltify"
version = "0.1.0"
description = "Convert React function components (JSX/TSX) into Svelte 5 components"
requires-python = ">=3.10"
dependencies = []
keywords = ["react", "svelte", "jsx", "tsx", "transpiler", "code generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sveltify = "sveltify.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sveltify"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
