"""Legacy link format migration (UNO: single function)."""

from ._constants import LEGACY_FILE_DIR_TOKEN, PLACEHOLDER_FILE_DIR


def migrate_legacy_template(template: str) -> str:
    """Rewrite the retired ``${filePath}`` token to ``${fileDir}``.

    Settings saved by earlier releases used ``${filePath}`` for the
    directory part of the note path. The renderer only knows ``${fileDir}``.
    """
    return template.replace(LEGACY_FILE_DIR_TOKEN, PLACEHOLDER_FILE_DIR)
