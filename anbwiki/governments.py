"""
Government types (common/governments) and government reforms
(common/government_reforms).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .clausewitz import (
    Block, ShapeError, parse_all_in_directory,
    read_array, read_bool, read_int, read_object, read_string,
)
from .modifiers import get_modifier

logger = logging.getLogger(__name__)


@dataclass
class ReformLevel:
    id: str
    reforms: list = field(default_factory=list)


@dataclass
class Government:
    id: str
    basic_reform: str = ''
    color: list = field(default_factory=list)
    reform_levels: dict = field(default_factory=dict)  # tier (from 1) -> ReformLevel


@dataclass
class GovernmentReform:
    id: str
    name: Optional[str] = None
    desc: Optional[str] = None
    icon: Optional[str] = None
    potential: Optional[Block] = None
    modifiers: dict = field(default_factory=dict)  # raw key -> raw scalar
    basic_reform: Optional[bool] = None
    monarchy: Optional[bool] = None


def _reform_level(level_id: str, value) -> ReformLevel:
    level = ReformLevel(id=level_id)
    try:
        body = read_object(value)
    except ShapeError:
        return level
    for key, _op, reforms in body.fields():
        if key != 'reforms':
            continue
        for reform in _array(reforms):
            try:
                level.reforms.append(read_string(reform))
            except ShapeError:
                logger.debug("Skipping reform %r in level %s", reform, level_id)
    return level


def _array(value) -> list:
    try:
        return read_array(value)
    except ShapeError:
        return []


def parse_government(block: Block) -> list:
    """Government types in one file, in file order."""
    governments = []

    for gov_id, _op, value in block.fields():
        government = Government(id=gov_id)
        if not isinstance(value, Block):
            governments.append(government)
            continue

        for key, _op, inner in value.fields():
            if key == 'reform_levels':
                try:
                    levels = read_object(inner)
                except ShapeError:
                    continue
                for tier, (level_id, _op, level) in enumerate(levels.fields(), 1):
                    government.reform_levels[tier] = _reform_level(level_id, level)
            elif key == 'basic_reform':
                try:
                    government.basic_reform = read_string(inner)
                except ShapeError:
                    pass
            elif key == 'color':
                try:
                    government.color = [read_int(c) for c in _array(inner)]
                except ShapeError:
                    logger.debug("Ignoring malformed color for %s", gov_id)

        governments.append(government)

    return governments


def parse_governments(directory: Union[str, Path]) -> list:
    governments = []
    for _path, block in parse_all_in_directory(directory):
        governments.extend(parse_government(block))
    return governments


def _flag(value) -> Optional[bool]:
    try:
        return read_bool(value)
    except ShapeError:
        return None


def parse_government_reform_file(block: Block, localisations: Optional[dict] = None) -> list:
    """
    Government reforms in one file.

    Only modifiers with a known descriptor are kept; anything else could
    not be shown to a reader anyway.
    """
    reforms = []

    for reform_id, _op, value in block.fields():
        if reform_id == 'defaults_reform':
            continue

        reform = GovernmentReform(id=reform_id)
        if localisations is not None:
            reform.name = localisations.get(reform_id)
            reform.desc = localisations.get(f"{reform_id}_desc")

        if isinstance(value, Block):
            for key, _op, inner in value.fields():
                if key == 'icon':
                    try:
                        reform.icon = read_string(inner)
                    except ShapeError:
                        pass
                elif key == 'modifiers':
                    _read_modifiers(reform, inner)
                elif key == 'potential':
                    reform.potential = inner if isinstance(inner, Block) else None
                elif key == 'basic_reform':
                    reform.basic_reform = _flag(inner)
                elif key == 'monarchy':
                    reform.monarchy = _flag(inner)

        reforms.append(reform)

    return reforms


def _read_modifiers(reform: GovernmentReform, value):
    try:
        modifiers = read_object(value)
    except ShapeError:
        return
    for key, _op, raw in modifiers.fields():
        if get_modifier(key) is None:
            logger.debug("Unknown modifier %s on reform %s", key, reform.id)
            continue
        try:
            reform.modifiers[key] = read_string(raw)
        except ShapeError:
            logger.debug("Skipping non-scalar modifier %s on reform %s", key, reform.id)


def parse_government_reforms(directory: Union[str, Path],
                             localisations: Optional[dict] = None) -> list:
    reforms = []
    for _path, block in parse_all_in_directory(directory):
        reforms.extend(parse_government_reform_file(block, localisations))
    return reforms
