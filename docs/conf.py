"""Sphinx configuration for sql_split documentation."""

import os
import sys
from importlib.metadata import metadata

# Add src/ to path so Sphinx can import sql_split modules directly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

_dist = metadata("sql-split")

project = "sql_split"
author = _dist["Author"]
copyright = f"2026, {author}"  # noqa: A001
release = _dist["Version"]

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]

# Napoleon (Google-style docstrings)
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# Theme
html_theme = "furo"
html_title = "sql_split"

# Autodoc
autodoc_member_order = "bysource"
autodoc_typehints = "description"

# Intersphinx
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# General
exclude_patterns = ["_build"]
