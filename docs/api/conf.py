"""
Sphinx configuration for the puzzle-search API reference.

Build with:
    pip install -e ".[docs]"
    sphinx-build -b html docs/api docs/api/_build
"""

import os
import sys

# Import the package straight from the src layout
sys.path.insert(0, os.path.abspath('../../src'))

from puzzle_search import __version__  # noqa: E402

# Project information
project = 'puzzle-search'
copyright = '2026, puzzle-search contributors'
author = 'puzzle-search contributors'
release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

source_suffix = '.rst'
master_doc = 'index'
exclude_patterns = ['_build']

html_theme = 'sphinx_rtd_theme'

# Autodoc settings
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'show-inheritance': True,
}

# Docstrings are Google style (Args/Returns/Raises/Attributes)
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_ivar = True
napoleon_attr_annotations = True

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
}

typehints_fully_qualified = False
typehints_document_rtype = True
