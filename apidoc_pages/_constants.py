"""Common literal values used across apidoc_pages.

These constants keep marker names, filenames, and the injected warning copy
centralized so the sorter, scanner, generator, and tests can import the same
values without drifting. Intended for internal use within the apidoc_pages
package.

Examples
--------
>>> from apidoc_pages import _constants
>>> _constants.INTERNAL_HEADING
'⚠️ Internal Properties'
>>> _constants.DEFAULT_ARTIFACT_NAME
'api.html'
"""

INTERNAL_PREFIX = "_"
INTERNAL_HEADING = "⚠️ Internal Properties"
INTERNAL_WARNING = (
    "> **Warning:** The following properties are internal implementation "
    "details and should not be accessed directly. They are prefixed with `_` "
    "to indicate they are private. Accessing these properties may break in "
    "future versions without notice."
)
DEFAULT_ARTIFACT_NAME = "api.html"
UNKNOWN_VERSION = "unknown"
