"""
Countries: the tag list, starting history, and the classification flags
derived from decisions, events and scripted triggers.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from .clausewitz import (
    Block, ParseError, ShapeError, parse_all_in_directory, parse_file,
    read_bool, read_int, read_string,
)
from .ideas import IdeaSet
from .scanner import END_GAME_POLICY, FORMABLE_POLICY, scan
from .utils import file_identifier

logger = logging.getLogger(__name__)

END_GAME_TRIGGER = 'was_never_end_game_tag_trigger'

# Tag reserved for the engine's internal "no country" placeholder
INTERNAL_TAGS = {'NPC'}

TAG_LINE = re.compile(r'^([A-Za-z0-9]{3})\s*=\s*"([^"]*)"')


@dataclass
class CountryHistory:
    setup_vision: bool = False
    government: str = ''
    government_reforms: list = field(default_factory=list)
    government_rank: int = 0
    primary_culture: str = ''
    accepted_cultures: list = field(default_factory=list)
    religion: str = ''
    technology_group: str = ''
    capital: int = 0
    fixed_capital: int = 0
    historical_rivals: list = field(default_factory=list)
    historical_friends: list = field(default_factory=list)


@dataclass
class Country:
    tag: str
    name: str = ''
    adjective: str = ''
    ideas: Optional[IdeaSet] = None
    history: CountryHistory = field(default_factory=CountryHistory)
    end_game_tag: bool = False
    formable: bool = False


def parse_country_tags(text: str) -> list:
    """
    common/country_tags: returns [(tag, country file path)].

    Lines look like `A01 = "countries/Lorent.txt"`.
    """
    tags = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        match = TAG_LINE.match(line)
        if not match:
            continue
        tag, path = match.groups()
        if tag in INTERNAL_TAGS:
            continue
        tags.append((tag, path))
    return tags


def _first(block: Block, key: str, reader, default):
    value = block.first(key)
    if value is None:
        return default
    try:
        return reader(value)
    except ShapeError:
        logger.debug("Ignoring malformed %s = %r", key, value)
        return default


def _every(block: Block, key: str) -> list:
    values = []
    for value in block.all(key):
        try:
            values.append(read_string(value))
        except ShapeError:
            logger.debug("Ignoring malformed %s = %r", key, value)
    return values


def parse_country_history(block: Block) -> CountryHistory:
    """Starting state from one history/countries file; dated entries are ignored."""
    return CountryHistory(
        setup_vision=_first(block, 'setup_vision', read_bool, False),
        government=_first(block, 'government', read_string, ''),
        government_reforms=_every(block, 'add_government_reform'),
        government_rank=_first(block, 'government_rank', read_int, 0),
        primary_culture=_first(block, 'primary_culture', read_string, ''),
        accepted_cultures=_every(block, 'add_accepted_culture'),
        religion=_first(block, 'religion', read_string, ''),
        technology_group=_first(block, 'technology_group', read_string, ''),
        capital=_first(block, 'capital', read_int, 0),
        fixed_capital=_first(block, 'fixed_capital', read_int, 0),
        historical_rivals=_every(block, 'historical_rival'),
        historical_friends=_every(block, 'historical_friend'),
    )


def parse_country_histories(directory: Union[str, Path]) -> dict:
    """history/countries: tag -> CountryHistory, keyed by the filename prefix."""
    histories = {}
    for filepath, block in parse_all_in_directory(directory):
        histories[file_identifier(filepath)] = parse_country_history(block)
    return histories


def parse_history_for_tag(directory: Union[str, Path], tag: str) -> Optional[CountryHistory]:
    """History of a single tag, without parsing every other file."""
    for filepath in sorted(Path(directory).glob(f"{tag}*.txt")):
        if file_identifier(filepath) != tag:
            continue
        try:
            return parse_country_history(parse_file(filepath))
        except (OSError, ParseError) as e:
            logger.warning("Failed to parse %s: %s", filepath, e)
    return None


def end_game_tags(block: Block) -> set:
    """Tags named in the scripted trigger that rules out end-game tags."""
    for key, _op, value in block.fields():
        if key == END_GAME_TRIGGER:
            return scan(value, END_GAME_POLICY)
    logger.warning("No %s in scripted triggers", END_GAME_TRIGGER)
    return set()


def formable_tags(blocks: Iterable[Block]) -> set:
    """
    Tags some decision or event turns a country into.

    Each file holds groups (`country_decisions = { ... }`) or definitions
    (`country_event = { ... }`); every entry below that level is scanned.
    """
    tags = set()
    for block in blocks:
        for _key, _op, group in block.fields():
            if not isinstance(group, Block):
                continue
            for _key, _op, definition in group.fields():
                scan(definition, FORMABLE_POLICY, tags)
    return tags


def _localised(localisations: dict, key: str) -> Optional[str]:
    value = localisations.get(key)
    return value if value else None


def enrich_country(country: Country, history: Optional[CountryHistory], localisations: dict,
                   end_game: set, formable: set,
                   idea_sets: Optional[dict] = None) -> Optional[Country]:
    """
    Fill in a bare Country from the side tables.

    Returns None when the tag has no display name: such tags are
    placeholders and never shown.
    """
    name = _localised(localisations, country.tag)
    if name is None:
        logger.debug("Dropping %s: no localised name", country.tag)
        return None

    country.name = name
    country.adjective = localisations.get(f"{country.tag}_ADJ", '')
    country.history = history or CountryHistory()
    country.ideas = (idea_sets or {}).get(country.tag)

    # Raw ids are kept when there is no display string for them
    culture = _localised(localisations, country.history.primary_culture)
    if culture is not None:
        country.history.primary_culture = culture
    religion = _localised(localisations, country.history.religion)
    if religion is not None:
        country.history.religion = religion

    country.end_game_tag = country.tag in end_game
    country.formable = country.tag in formable
    return country


def enrich_countries(tags: Iterable, histories: dict, localisations: dict,
                     end_game: set, formable: set,
                     idea_sets: Optional[dict] = None) -> list:
    """
    Countries for every listed tag that has a display name, sorted by tag.

    Only tags from the tag list are considered; history for any other tag
    is ignored.
    """
    countries = {}
    for tag in tags:
        if isinstance(tag, tuple):
            tag = tag[0]
        country = enrich_country(
            Country(tag=tag), histories.get(tag), localisations,
            end_game, formable, idea_sets,
        )
        if country is not None:
            countries[tag] = country

    return [countries[tag] for tag in sorted(countries)]


def read_definition_blocks(directories: Iterable[Union[str, Path]]) -> list:
    """Parse every script file under the given directories."""
    blocks = []
    for directory in directories:
        for _path, block in parse_all_in_directory(directory, recursive=True):
            blocks.append(block)
    return blocks
