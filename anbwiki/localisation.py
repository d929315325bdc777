"""
Localisation loading.

Paradox localisation files are YAML-like but not YAML: every entry sits on
one line as `key:0 "value"`, values can contain unescaped quotes and
lines may end in a comment. Parse them line by line instead.
"""

import logging
from pathlib import Path
from typing import Union

from .utils import list_files

logger = logging.getLogger(__name__)


def parse_localisation_line(line: str):
    """Return (key, value) for one entry line, or None for anything else."""
    line = line.strip()
    if not line or line.startswith('#') or ':' not in line:
        return None

    key, rest = line.split(':', 1)
    if not key:
        return None

    # Shorter than `0 ""` cannot hold a value
    if len(rest) < 4:
        return key, ''

    value = rest.lstrip('0123456789').lstrip()

    # Drop any inline comment after the closing quote
    if not value.endswith('"'):
        last_quote = value.rfind('"')
        if last_quote >= 0:
            value = value[:last_quote]

    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]

    return key, value


def parse_localisation_file(text: str) -> dict:
    """Parse the contents of one localisation file into {key: value}."""
    localisations = {}
    # First line is the language header (l_english:)
    for line in text.splitlines()[1:]:
        entry = parse_localisation_line(line)
        if entry is not None:
            key, value = entry
            localisations[key] = value
    return localisations


def load_localisations(directory: Union[str, Path], pattern: str = "*.yml") -> dict:
    """Load and merge every localisation file under directory."""
    localisations = {}

    for filepath in list_files(directory, pattern):
        try:
            text = filepath.read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read localisation %s: %s", filepath, e)
            continue
        localisations.update(parse_localisation_file(text))

    logger.debug("Loaded %d localisation keys from %s", len(localisations), directory)
    return localisations
