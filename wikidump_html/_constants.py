"""Common literal values used across wikidump_html.

Examples
--------
>>> from wikidump_html import _constants
>>> _constants.DEFAULT_OUTPUT_DIRNAME
'wiki-dump-to-html-output'
"""

EXE_NAME = "wiki-dump-to-html"
DEFAULT_OUTPUT_DIRNAME = f"{EXE_NAME}-output"
INDEX_STEM = "index"
INDEX_FILENAME = f"{INDEX_STEM}.html"
PAGE_FILENAME_TEMPLATE = "{identifier}.html"
