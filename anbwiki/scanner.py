"""
Recursive key search over parsed script trees.

Trigger and effect blocks nest to any depth (OR/AND/NOT, if/else, scopes),
so finding e.g. every country tag a trigger mentions means walking the whole
tree. One traversal serves every use; a ScanPolicy says which keys to
collect, which subtrees to leave alone and whether to stop at the first hit.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .clausewitz import Block, ShapeError, read_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanPolicy:
    """What a scan collects and what it skips."""
    targets: frozenset
    opaque: frozenset = frozenset()
    # Once a target is found in an object, ignore the rest of that object
    stop_at_first: bool = False

    @classmethod
    def of(cls, targets: Iterable[str], opaque: Iterable[str] = (),
           stop_at_first: bool = False) -> "ScanPolicy":
        return cls(frozenset(targets), frozenset(opaque), stop_at_first)


# Tags named in the end-game trigger
END_GAME_POLICY = ScanPolicy.of(['tag', 'was_tag'])

# change_tag effects in decisions and events. Conditions and map
# highlights mention tags without the country becoming them.
FORMABLE_POLICY = ScanPolicy.of(
    ['change_tag'],
    opaque=['potential', 'allow', 'provinces_to_highlight'],
    stop_at_first=True,
)

# Tags a mission tree is available to; NOT blocks list the excluded ones
MISSION_POLICY = ScanPolicy.of(['tag', 'was_tag'], opaque=['NOT'])


def scan(value, policy: ScanPolicy, found: Optional[set] = None) -> set:
    """
    Collect the values of every target key under value.

    Args:
        value: Any parsed value; only objects are searched
        policy: Keys to collect and subtrees to skip
        found: Set to add results to, so one set can span many files

    Returns:
        The set of string values found (the same object as found, if given)
    """
    if found is None:
        found = set()

    if not isinstance(value, Block):
        return found

    for key, _op, child in value.fields():
        if key in policy.opaque:
            continue

        if key in policy.targets:
            try:
                found.add(read_string(child))
            except ShapeError:
                logger.debug("Skipping non-scalar %s = %r", key, child)
                continue
            if policy.stop_at_first:
                return found
        else:
            scan(child, policy, found)

    return found


def scan_all(values: Iterable, policy: ScanPolicy, found: Optional[set] = None) -> set:
    """Scan several values into one result set."""
    if found is None:
        found = set()
    for value in values:
        scan(value, policy, found)
    return found
