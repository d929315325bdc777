"""
National idea sets from common/ideas.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .clausewitz import Block, ShapeError, read_object, read_string

logger = logging.getLogger(__name__)


@dataclass
class Idea:
    name: str
    title: str = ''
    description: str = ''
    effects: dict = field(default_factory=dict)


@dataclass
class IdeaSet:
    name: str
    tags: list = field(default_factory=list)
    start: dict = field(default_factory=dict)
    bonus: dict = field(default_factory=dict)
    ideas: list = field(default_factory=list)


def _scalar_fields(value) -> dict:
    """Modifier block -> {key: raw value}, skipping nested effects."""
    result = {}
    try:
        block = read_object(value)
    except ShapeError:
        return result
    for key, _op, raw in block.fields():
        try:
            result[key] = read_string(raw)
        except ShapeError:
            continue
    return result


def _trigger_tags(value) -> list:
    """Tags from `trigger = { tag = X }` or `trigger = { OR = { tag = X tag = Y } }`."""
    tags = []
    try:
        trigger = read_object(value)
    except ShapeError:
        return tags
    for key, _op, inner in trigger.fields():
        if key == 'OR':
            try:
                alternatives = read_object(inner)
            except ShapeError:
                continue
            for alt_key, _op, tag in alternatives.fields():
                if alt_key.lower() == 'tag' and isinstance(tag, str):
                    tags.append(tag)
        elif key == 'tag' and isinstance(inner, str):
            tags.append(inner)
    return tags


def parse_idea_set(name: str, block: Block) -> IdeaSet:
    idea_set = IdeaSet(name=name)

    for key, _op, value in block.fields():
        if key == 'start':
            idea_set.start = _scalar_fields(value)
        elif key == 'bonus':
            idea_set.bonus = _scalar_fields(value)
        elif key == 'trigger':
            idea_set.tags = _trigger_tags(value)
        elif key in ('free', 'category', 'important', 'ai_will_do'):
            continue
        elif isinstance(value, Block):
            # there can be effects in ideas - only scalar modifiers are kept
            idea_set.ideas.append(Idea(name=key, effects=_scalar_fields(value)))

    return idea_set


def localise_idea_set(idea_set: IdeaSet, localisations: dict) -> Optional[str]:
    """
    Fill in idea titles (`<idea>`) and descriptions (`<idea>_desc`).

    Returns the set's display name, or None when it has none; such sets
    are not shown.
    """
    for idea in idea_set.ideas:
        idea.title = localisations.get(idea.name) or idea.name
        idea.description = localisations.get(f"{idea.name}_desc", '')

    set_name = localisations.get(idea_set.name)
    if not set_name:
        logger.debug("No localised name for idea set %s", idea_set.name)
        return None
    return set_name


def parse_ideas(block: Block) -> dict:
    """Country idea file -> {tag: IdeaSet}."""
    idea_sets = {}

    for name, _op, value in block.fields():
        if not isinstance(value, Block):
            continue
        idea_set = parse_idea_set(name, value)
        for tag in idea_set.tags:
            idea_sets[tag] = idea_set

    return idea_sets
