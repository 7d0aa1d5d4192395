"""Sphinx configuration for theme-tokens documentation."""

import os
import sys
from datetime import datetime

# -- Path setup --------------------------------------------------------------
# Add the src directory to sys.path for autodoc
sys.path.insert(0, os.path.abspath("../../../src"))

# -- Project information -----------------------------------------------------
project = "Theme Tokens"
copyright = f"{datetime.now().year}, Theme Tokens contributors"
author = "Theme Tokens contributors"
from theme_tokens import __version__  # noqa: E402

version = __version__
release = __version__

# -- General configuration ---------------------------------------------------
extensions = [
    # Core Sphinx extensions
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    # Third-party extensions
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
    "myst_parser",
]

# -- Autodoc configuration ---------------------------------------------------
autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "special-members": "__init__",
    "undoc-members": True,
    "exclude-members": "__weakref__",
    "show-inheritance": True,
}

# Type hints configuration
autodoc_typehints = "description"
autodoc_typehints_description_target = "documented"

# Generate autosummary stubs
autosummary_generate = True

# -- Napoleon settings (NumPy-style docstrings) ------------------------------
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = True
napoleon_include_private_with_doc = False
napoleon_use_admonition_for_examples = True
napoleon_use_param = True
napoleon_use_rtype = True
napoleon_preprocess_types = True
napoleon_attr_annotations = True

# -- Intersphinx configuration -----------------------------------------------
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pydantic": ("https://docs.pydantic.dev/latest/", None),
}

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "prev_next_buttons_location": "bottom",
    "collapse_navigation": False,
    "navigation_depth": 4,
}

# -- Source suffix configuration ---------------------------------------------
source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

# -- MyST Parser configuration -----------------------------------------------
myst_enable_extensions = [
    "colon_fence",
    "deflist",
]

# -- Exclude patterns --------------------------------------------------------
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
