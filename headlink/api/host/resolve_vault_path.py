"""Vault directory resolution (UNO: single function)."""

from pathlib import Path


def resolve_vault_path(vault: str) -> Path:
    """Resolve the vault directory; an empty string means the working directory.

    Raises:
        ValueError: If the directory does not exist
    """
    from headlink.utils.normalize_path import normalize_path

    vault_path = normalize_path(vault) if vault else Path.cwd()
    if not vault_path.is_dir():
        raise ValueError(f"Vault directory does not exist: {vault_path}")
    return vault_path
