"""Common literal values used across pagedtext.

These constants keep sentinel prefixes, filenames, and defaults centralized so
the parser, generator, and tests can import the same values without drifting.
Intended for internal use within the pagedtext package.

Examples
--------
>>> from pagedtext import _constants
>>> _constants.DOC_META_TEMPLATE.format(key="romeo")
'.pagedtext-romeo-meta.json'
>>> _constants.DEFAULT_ELEMENTS_PER_PAGE
70
"""

DEFAULT_ELEMENTS_PER_PAGE = 70
HEADING_MINOR_MAX_LENGTH = 20

IMAGE_PREFIX = "image:"
BUTTON_PREFIX = "button:"
DIRECTIVE_MARKER = ",page="
QUOTE_MARKER = " "

BASE_CLASS = "contentText"
DOC_META_TEMPLATE = ".pagedtext-{key}-meta.json"
