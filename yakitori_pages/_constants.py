"""Common literal values used across yakitori_pages.

These constants keep front-matter delimiters, content suffixes, and the
canonical date format centralized so the schema, the content reader, and tests
import the same values without drifting. Intended for internal use within the
package.

Examples
--------
>>> from yakitori_pages import _constants
>>> _constants.FRONT_MATTER_DELIMITER
'---'
>>> ".md" in _constants.CONTENT_SUFFIXES
True
"""

FRONT_MATTER_DELIMITER = "---"
CANONICAL_DATE_FORMAT = "YYYY-MM-DD"
CONTENT_SUFFIXES = (".md", ".mdx")
