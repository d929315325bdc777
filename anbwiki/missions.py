"""
Mission trees (missions/*.txt).
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .clausewitz import Block, ShapeError, read_array, read_bool, read_int, read_string
from .scanner import MISSION_POLICY, scan

logger = logging.getLogger(__name__)

# Keys of a mission tree that are settings rather than missions
TREE_SETTINGS = ('generic', 'ai', 'has_country_shield', 'slot', 'potential', 'potential_on_load')


@dataclass
class Mission:
    id: str
    icon: Optional[str] = None
    position: Optional[int] = None
    required_missions: list = field(default_factory=list)


@dataclass
class MissionTree:
    id: str
    generic: bool = False
    ai: bool = False
    has_country_shield: bool = False
    slot: Optional[int] = None
    missions: list = field(default_factory=list)


def _read(reader, value, what: str, default=None):
    try:
        return reader(value)
    except ShapeError:
        logger.debug("Ignoring malformed %s %r", what, value)
        return default


def parse_mission(mission_id: str, block: Block) -> Optional[Mission]:
    """A mission, or None if the entry has neither a position nor a trigger."""
    mission = Mission(id=mission_id)
    is_a_mission = False

    for key, _op, value in block.fields():
        if key == 'icon':
            mission.icon = _read(read_string, value, 'mission icon')
        elif key == 'position':
            is_a_mission = True
            mission.position = _read(read_int, value, 'mission position')
        elif key == 'trigger':
            is_a_mission = True
        elif key == 'required_missions':
            for required in _read(read_array, value, 'required_missions', []):
                if isinstance(required, str):
                    mission.required_missions.append(required)

    return mission if is_a_mission else None


def parse_mission_file(block: Block) -> list:
    trees = []

    for tree_id, _op, value in block.fields():
        tree = MissionTree(id=tree_id)
        if not isinstance(value, Block):
            trees.append(tree)
            continue

        for key, _op, inner in value.fields():
            if key == 'generic':
                tree.generic = _read(read_bool, inner, 'generic', False)
            elif key == 'ai':
                tree.ai = _read(read_bool, inner, 'ai', False)
            elif key == 'has_country_shield':
                tree.has_country_shield = _read(read_bool, inner, 'has_country_shield', False)
            elif key == 'slot':
                tree.slot = _read(read_int, inner, 'slot')
            elif key in TREE_SETTINGS:
                continue
            elif isinstance(inner, Block):
                mission = parse_mission(key, inner)
                if mission is not None:
                    tree.missions.append(mission)

        trees.append(tree)

    return trees


def tags_with_missions(blocks: Iterable[Block]) -> set:
    """Tags any mission tree's potential is written for."""
    tags = set()
    for block in blocks:
        for _key, _op, tree in block.fields():
            if not isinstance(tree, Block):
                continue
            for key, _op, value in tree.fields():
                if key == 'potential':
                    scan(value, MISSION_POLICY, tags)
    return tags
