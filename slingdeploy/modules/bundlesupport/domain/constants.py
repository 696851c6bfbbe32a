"""Constants shared across the bundle support module."""

JSON_MIME_TYPE = "application/json"
DEFAULT_BUNDLE_MIME_TYPE = "application/java-archive"
DEFAULT_BUNDLE_START_LEVEL = "20"

# Felix Web Console REST API
CONSOLE_INSTALL_PATH = "install"
CONSOLE_BUNDLES_PATH = "bundles/"
CONSOLE_BUNDLE_FILE_FIELD = "bundlefile"
CONSOLE_NO_REDIRECT = "_noredir_"

# Sling POST servlet
SLING_POST_FILE_FIELD = "*"
SLING_POST_TYPE_HINT_FIELD = "*@TypeHint"
SLING_POST_FILE_NODE_TYPE = "nt:file"
SLING_POST_OPERATION_FIELD = ":operation"
SLING_POST_DELETE_OPERATION = "delete"

# WebDAV
MKCOL_METHOD = "MKCOL"

# Longest part of a response body quoted in error messages
BODY_EXCERPT_LENGTH = 200
