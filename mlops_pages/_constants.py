"""Common literal values used across mlops_pages.

These constants keep placeholder tokens and default paths centralized so the
config models, exporters, and tests import the same values without drifting.
Intended for internal use within the mlops_pages package.

Examples
--------
>>> from mlops_pages import _constants
>>> _constants.PATH_PLACEHOLDER
':path'
>>> str(_constants.DEFAULT_OUTPUT)
'docs/.vitepress/config.mjs'
"""

from pathlib import Path

PATH_PLACEHOLDER = ":path"
DEFAULT_VARIANT = "default"
DEFAULT_DOCS_ROOT = Path("docs")
DEFAULT_OUTPUT = DEFAULT_DOCS_ROOT / ".vitepress" / "config.mjs"
