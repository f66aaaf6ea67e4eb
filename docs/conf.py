"""Sphinx configuration for fastapi-shiptrack."""

project = "fastapi-shiptrack"
release = "0.1.0"

extensions = [
    "myst_parser",
    "autodoc2",
]

autodoc2_packages = [
    {
        "path": "../src/fastapi_shiptrack",
        "module": "fastapi_shiptrack",
    },
]

exclude_patterns = ["_build"]

html_theme = "furo"
