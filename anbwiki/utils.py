"""
Utility functions shared by the anbwiki extractors.
"""

from pathlib import Path
from typing import Optional, Union


def list_files(directory: Union[str, Path], pattern: str = "*") -> list:
    """Every file under directory (recursively) matching pattern, sorted."""
    directory = Path(directory)
    return sorted(p for p in directory.rglob(pattern) if p.is_file())


def file_identifier(path: Union[str, Path], separator: str = '-') -> str:
    """
    The identifier a data file is named after.

    History files are named like "1 - Lorentainé.txt" or "A01 - Lorent.txt";
    the part before the separator is the join key with the rest of the data.
    """
    stem = Path(path).stem
    if separator in stem:
        stem = stem.split(separator, 1)[0]
    return stem.strip()


def province_id_from_path(path: Union[str, Path]) -> Optional[int]:
    """Numeric province id from a province history filename, or None."""
    ident = file_identifier(path)
    if not ident.isdigit():
        return None
    return int(ident)


def prettify_id(id_str: str) -> str:
    """Convert a game ID to a human-readable display name."""
    if not id_str:
        return id_str

    # Remove common prefixes
    prefixes = ['government_reform:', 'religion:', 'culture:', 'c:']
    for prefix in prefixes:
        if id_str.startswith(prefix):
            id_str = id_str[len(prefix):]

    name = id_str.replace('_', ' ').title()

    # Fix common terms
    replacements = {
        ' Of ': ' of ',
        ' The ': ' the ',
        ' And ': ' and ',
        ' In ': ' in ',
        ' On ': ' on ',
        ' A ': ' a ',
        ' An ': ' an ',
        'Hre ': 'HRE ',
        ' Hre': ' HRE',
    }
    for old, new in replacements.items():
        name = name.replace(old, new)

    if name:
        name = name[0].upper() + name[1:]

    return name.strip()
