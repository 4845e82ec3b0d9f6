# Configuration file for the Sphinx documentation builder.
#
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

# -- Path setup --------------------------------------------------------------

# The package lives at the repository root, one level above this directory.
sys.path.insert(0, os.path.abspath('../'))

# -- Project information -----------------------------------------------------

project = 'Portfolio Site Loader'
copyright = '2025, Burch Parshall'
author = 'Burch Parshall'
release = '1.0.0'
version = '1.0.0'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx.ext.coverage',
]

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']
pygments_style = 'sphinx'

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'
html_theme_options = {
    'navigation_depth': 3,
    'titles_only': False,
}

# -- Options for autodoc ----------------------------------------------------

autoclass_content = 'both'
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'undoc-members': True,
    'exclude-members': '__weakref__'
}

# -- Options for Napoleon ---------------------------------------------------

# Docstrings use the Sphinx field list format.
napoleon_numpy_docstring = False
napoleon_google_docstring = False
napoleon_use_param = True
napoleon_use_rtype = True

# -- Options for intersphinx extension --------------------------------------

intersphinx_mapping = {
    'python': ('https://docs.python.org/3/', None),
    'flask': ('https://flask.palletsprojects.com/', None),
    'jinja2': ('https://jinja.palletsprojects.com/', None),
    'urllib3': ('https://urllib3.readthedocs.io/en/stable/', None),
}

coverage_show_missing_items = True
