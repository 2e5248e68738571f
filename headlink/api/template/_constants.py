"""Placeholder vocabulary for link templates (private)."""

PLACEHOLDER_FILE_DIR = "${fileDir}"
PLACEHOLDER_FILE_BASENAME = "${fileBasename}"
PLACEHOLDER_HEADING_TEXT = "${headingText}"

# Substitution order; tokens are distinct and none is a prefix of another
PLACEHOLDERS = (PLACEHOLDER_FILE_DIR, PLACEHOLDER_FILE_BASENAME, PLACEHOLDER_HEADING_TEXT)

# Older settings files name the directory token ${filePath}
LEGACY_FILE_DIR_TOKEN = "${filePath}"

DEFAULT_LINK_FORMAT = "${fileDir}/${fileBasename}#${headingText}|${headingText}"
