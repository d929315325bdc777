"""
Map geography: provinces grouped into areas, regions and super-regions.

map/area.txt, map/region.txt and map/superregion.txt are written
independently and only refer to each other by id. Assembly works top-down
through pools: each level's entities sit in a Pool and a parent *takes*
the ones it references, so an entity can only ever end up under one parent.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .clausewitz import (
    Block, ShapeError, parse_all_in_directory, parse_file,
    read_array, read_bool, read_int, read_object, read_string,
)
from .utils import province_id_from_path

logger = logging.getLogger(__name__)

RESTRICT_CHARTER = 'restrict_charter'


class HierarchyError(ValueError):
    """An entity was referenced by more than one parent."""


@dataclass
class ProvinceHistory:
    """Starting state from history/provinces."""
    owner: Optional[str] = None
    controller: Optional[str] = None
    culture: Optional[str] = None
    religion: Optional[str] = None
    base_tax: Optional[int] = None
    base_production: Optional[int] = None
    base_manpower: Optional[int] = None
    trade_goods: Optional[str] = None
    is_city: Optional[bool] = None


@dataclass(eq=False)
class Province:
    id: int
    name: str = ''
    adj: str = ''
    history: Optional[ProvinceHistory] = None

    def __eq__(self, other):
        if not isinstance(other, Province):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


@dataclass(eq=False)
class Area:
    id: str
    name: str = ''
    provinces: dict = field(default_factory=dict)  # province id -> Province

    def __eq__(self, other):
        if not isinstance(other, Area):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


@dataclass(eq=False)
class Region:
    id: str
    name: str = ''
    areas: dict = field(default_factory=dict)  # area id -> Area

    def __eq__(self, other):
        if not isinstance(other, Region):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


@dataclass(eq=False)
class SuperRegion:
    id: str
    name: str = ''
    regions: dict = field(default_factory=dict)  # region id -> Region
    restrict_charter: bool = False

    def __eq__(self, other):
        if not isinstance(other, SuperRegion):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


class Pool:
    """
    Unclaimed entities of one level, keyed by id.

    take() removes and returns an entity in one step and records who took
    it, so a later reference to the same id can be told apart from a
    reference to an id that never existed.
    """

    def __init__(self, items=()):
        self._items = {}
        self._claimed_by = {}
        for item in items:
            self.add(item)

    def add(self, item):
        self._items[item.id] = item

    def take(self, key, claimant: str):
        item = self._items.pop(key, None)
        if item is not None:
            self._claimed_by[key] = claimant
        return item

    def claimed_by(self, key) -> Optional[str]:
        return self._claimed_by.get(key)

    def remaining(self) -> list:
        """Entities no parent has taken, in insertion order."""
        return list(self._items.values())

    def __contains__(self, key) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class AssemblyDiagnostics:
    """Counts of everything assembly tolerated instead of failing on."""
    unresolved: int = 0
    double_claims: int = 0
    dropped_regions: int = 0
    dropped_superregions: int = 0
    unclaimed_areas: int = 0
    unclaimed_regions: int = 0

    def total(self) -> int:
        return self.unresolved + self.double_claims


class HierarchyAssembler:
    """
    Builds SuperRegion -> Region -> Area -> Province trees from flat tables.

    In strict mode an id referenced by two parents raises HierarchyError;
    otherwise it is logged and the second reference is skipped. References
    to ids that were never defined are logged and counted in both modes.
    """

    def __init__(self, localisations: Optional[dict] = None,
                 histories: Optional[dict] = None, strict: bool = False):
        self.localisations = localisations or {}
        self.histories = histories or {}
        self.strict = strict
        self.diagnostics = AssemblyDiagnostics()

    def assemble(self, areas: dict, regions: dict, superregions: list) -> list:
        """
        Args:
            areas: area id -> list of province ids
            regions: region id -> list of area ids
            superregions: list of (super-region id, list of region ids / markers)

        Returns:
            List of SuperRegion, each with at least one region
        """
        self.diagnostics = AssemblyDiagnostics()

        province_pool = Pool(self.build_provinces(areas))
        area_pool = Pool(self.build_areas(areas, province_pool))
        region_pool = Pool(self.build_regions(regions, area_pool))
        result = self.build_superregions(superregions, region_pool)

        self.diagnostics.unclaimed_areas = len(area_pool)
        self.diagnostics.unclaimed_regions = len(region_pool)
        logger.info(
            "Assembled %d super-regions (%d unresolved references, %d double claims, "
            "%d unclaimed areas, %d unclaimed regions)",
            len(result), self.diagnostics.unresolved, self.diagnostics.double_claims,
            self.diagnostics.unclaimed_areas, self.diagnostics.unclaimed_regions,
        )
        return result

    def build_provinces(self, areas: dict) -> list:
        """One Province per id referenced by any area, decorated by id."""
        provinces = {}
        for province_ids in areas.values():
            for province_id in province_ids:
                if province_id in provinces:
                    continue
                provinces[province_id] = Province(
                    id=province_id,
                    name=self.localisations.get(f"PROV{province_id}", ''),
                    adj=self.localisations.get(f"PROV_ADJ{province_id}", ''),
                    history=self.histories.get(province_id),
                )
        return list(provinces.values())

    def build_areas(self, areas: dict, pool: Pool) -> list:
        result = []
        for area_id, province_ids in areas.items():
            area = Area(id=area_id, name=self.localisations.get(f"{area_id}_name", ''))
            for province_id in province_ids:
                province = self._claim(pool, province_id, area_id, 'province')
                if province is not None:
                    area.provinces[province.id] = province
            result.append(area)
        return result

    def build_regions(self, regions: dict, pool: Pool) -> list:
        result = []
        for region_id, area_ids in regions.items():
            region = Region(id=region_id, name=self.localisations.get(f"{region_id}_name", ''))
            for area_id in area_ids:
                area = self._claim(pool, area_id, region_id, 'area')
                if area is not None:
                    region.areas[area.id] = area

            if not region.areas:
                logger.debug("Dropping region %s: no areas resolved", region_id)
                self.diagnostics.dropped_regions += 1
                continue
            result.append(region)
        return result

    def build_superregions(self, superregions: list, pool: Pool) -> list:
        result = []
        for sr_id, members in superregions:
            super_region = SuperRegion(id=sr_id, name=self.localisations.get(sr_id, ''))
            for member in members:
                if member == RESTRICT_CHARTER:
                    super_region.restrict_charter = True
                    continue
                region = self._claim(pool, member, sr_id, 'region')
                if region is not None:
                    super_region.regions[region.id] = region

            # ignore empty
            if not super_region.regions:
                logger.debug("Dropping super-region %s: no regions resolved", sr_id)
                self.diagnostics.dropped_superregions += 1
                continue
            result.append(super_region)
        return result

    def _claim(self, pool: Pool, key, claimant: str, kind: str):
        item = pool.take(key, claimant)
        if item is not None:
            return item

        owner = pool.claimed_by(key)
        if owner is not None:
            message = f"{kind} {key} referenced by {claimant} was already claimed by {owner}"
            if self.strict:
                raise HierarchyError(message)
            logger.warning(message)
            self.diagnostics.double_claims += 1
        else:
            logger.debug("%s %s referenced by %s does not exist", kind, key, claimant)
            self.diagnostics.unresolved += 1
        return None


# ---------------------------------------------------------------------------
# Flat map files
# ---------------------------------------------------------------------------

def read_areas(block: Block) -> dict:
    """map/area.txt: area id -> province ids."""
    areas = {}
    for area_id, _op, value in block.fields():
        province_ids = []
        if isinstance(value, Block):
            # `{ color = { ... } 1 2 3 }`: provinces are the bare tokens
            members = [key for key, op, _v in value.fields() if op is None]
        else:
            try:
                members = read_array(value)
            except ShapeError:
                logger.debug("Skipping malformed area %s", area_id)
                members = []
        for member in members:
            try:
                province_ids.append(read_int(member))
            except ShapeError:
                logger.debug("Skipping province %r in area %s", member, area_id)
        areas[area_id] = province_ids
    return areas


def read_regions(block: Block) -> dict:
    """map/region.txt: region id -> area ids."""
    regions = {}
    for region_id, _op, value in block.fields():
        area_ids = []
        try:
            body = read_object(value)
        except ShapeError:
            body = Block()
        for key, _op, members in body.fields():
            if key != 'areas':
                continue
            try:
                area_ids.extend(read_string(m) for m in read_array(members))
            except ShapeError:
                logger.debug("Skipping malformed areas list in region %s", region_id)
        regions[region_id] = area_ids
    return regions


def read_superregions(block: Block) -> list:
    """map/superregion.txt: [(super-region id, region ids and markers)]."""
    superregions = []
    for sr_id, _op, value in block.fields():
        members = []
        try:
            for member in read_array(value):
                members.append(read_string(member))
        except ShapeError:
            logger.debug("Skipping malformed super-region %s", sr_id)
        superregions.append((sr_id, members))
    return superregions


def parse_continents(block: Block) -> dict:
    """map/continent.txt: province id -> continent id."""
    continents = {}
    for continent, _op, value in block.fields():
        try:
            members = read_array(value)
        except ShapeError:
            continue
        for member in members:
            try:
                continents[read_int(member)] = continent
            except ShapeError:
                logger.debug("Skipping province %r in continent %s", member, continent)
    return dict(sorted(continents.items()))


def parse_continents_inverse(block: Block) -> dict:
    """Continent id -> sorted province ids."""
    inverse = {}
    for province_id, continent in parse_continents(block).items():
        inverse.setdefault(continent, []).append(province_id)
    return inverse


# ---------------------------------------------------------------------------
# Province history
# ---------------------------------------------------------------------------

def _optional(block: Block, key: str, reader, take_last: bool = False):
    value = block.last(key) if take_last else block.first(key)
    if value is None:
        return None
    try:
        return reader(value)
    except ShapeError:
        logger.debug("Ignoring malformed %s = %r", key, value)
        return None


def parse_province_history(block: Block) -> ProvinceHistory:
    """Top-level starting state of one province; dated entries are ignored."""
    return ProvinceHistory(
        owner=_optional(block, 'owner', read_string, take_last=True),
        controller=_optional(block, 'controller', read_string),
        culture=_optional(block, 'culture', read_string),
        religion=_optional(block, 'religion', read_string),
        base_tax=_optional(block, 'base_tax', read_int),
        base_production=_optional(block, 'base_production', read_int),
        base_manpower=_optional(block, 'base_manpower', read_int),
        trade_goods=_optional(block, 'trade_goods', read_string, take_last=True),
        is_city=_optional(block, 'is_city', read_bool),
    )


def parse_province_histories(directory: Union[str, Path]) -> dict:
    """history/provinces: province id -> ProvinceHistory."""
    histories = {}
    for filepath, block in parse_all_in_directory(directory):
        province_id = province_id_from_path(filepath)
        if province_id is None:
            logger.warning("Skipping %s: no province id in filename", filepath)
            continue
        histories[province_id] = parse_province_history(block)
    return dict(sorted(histories.items()))


def parse_map(map_dir: Union[str, Path], history_dir: Union[str, Path],
              localisations: dict, strict: bool = False) -> list:
    """Read the map files from disk and assemble the super-region trees."""
    map_dir = Path(map_dir)
    assembler = HierarchyAssembler(
        localisations=localisations,
        histories=parse_province_histories(history_dir),
        strict=strict,
    )
    return assembler.assemble(
        read_areas(parse_file(map_dir / 'area.txt')),
        read_regions(parse_file(map_dir / 'region.txt')),
        read_superregions(parse_file(map_dir / 'superregion.txt')),
    )
