"""
Country events (events/*.txt).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .clausewitz import Block, ShapeError, parse_all_in_directory, read_string

logger = logging.getLogger(__name__)


@dataclass
class Event:
    id: str
    title: Optional[str] = None


@dataclass
class EventSet:
    source: str = ''
    # A file can declare several namespaces, so none is kept
    events: list = field(default_factory=list)


def parse_event_set(block: Block, source: str = '') -> EventSet:
    event_set = EventSet(source=source)

    for value in block.all('country_event'):
        if not isinstance(value, Block):
            continue
        try:
            event_id = read_string(value.first('id'))
        except ShapeError:
            logger.debug("Skipping country_event without an id in %s", source)
            continue
        title = value.last('title')
        event_set.events.append(Event(id=event_id, title=title if isinstance(title, str) else None))

    return event_set


def parse_events(directory: Union[str, Path]) -> list:
    """Every event file with at least one country event."""
    results = []
    for filepath, block in parse_all_in_directory(directory):
        event_set = parse_event_set(block, filepath.stem)
        if not event_set.events:
            continue
        results.append(event_set)
    return results
