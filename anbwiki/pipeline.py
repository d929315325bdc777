#!/usr/bin/env python3
"""
anbwiki - Data Extraction

Reads the game files, assembles the map hierarchy and country records and
writes them as JSON for the wiki page generators.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

from . import settings
from .clausewitz import ParseError, parse_all_in_directory, parse_file
from .countries import (
    end_game_tags, enrich_countries, formable_tags, parse_country_histories,
    parse_country_tags, read_definition_blocks,
)
from .events import parse_events
from .geography import HierarchyError, parse_continents, parse_map
from .governments import parse_government_reforms, parse_governments
from .ideas import localise_idea_set, parse_ideas
from .localisation import load_localisations
from .missions import parse_mission_file, tags_with_missions
from .modifiers import localise_strings
from .utils import list_files, prettify_id

logger = logging.getLogger("anbwiki")

SECTIONS = ('map', 'countries', 'governments', 'missions', 'events')


def extract_map(paths: settings.GamePaths, localisations: dict, strict: bool = False) -> dict:
    """Super-region trees plus a flat province list."""
    print("Extracting map...")
    settings.require(paths.map / "area.txt", paths.map / "region.txt",
                     paths.map / "superregion.txt", paths.province_history)

    super_regions = parse_map(paths.map, paths.province_history, localisations, strict=strict)

    continents = {}
    if paths.continents.exists():
        try:
            continents = parse_continents(parse_file(paths.continents))
        except (OSError, ParseError) as e:
            logger.warning("Ignoring continents, %s could not be parsed: %s", paths.continents, e)

    tree = []
    provinces = []
    for super_region in super_regions:
        regions = []
        for region in super_region.regions.values():
            areas = []
            for area in region.areas.values():
                areas.append({
                    'id': area.id,
                    'name': area.name,
                    'provinces': sorted(area.provinces),
                })
                for province in area.provinces.values():
                    continent = continents.get(province.id, '')
                    provinces.append({
                        'id': province.id,
                        'name': province.name,
                        'adjective': province.adj,
                        'continent': localisations.get(continent, continent),
                        'superregion': super_region.name,
                        'region': region.name,
                        'area': area.name,
                        'history': asdict(province.history) if province.history else None,
                    })
            regions.append({'id': region.id, 'name': region.name, 'areas': areas})
        tree.append({
            'id': super_region.id,
            'name': super_region.name,
            'restrict_charter': super_region.restrict_charter,
            'regions': regions,
        })

    provinces.sort(key=lambda p: p['id'])
    print(f"  Found {len(super_regions)} super-regions, {len(provinces)} provinces")
    return {'superregions': tree, 'provinces': provinces}


def load_idea_sets(paths: settings.GamePaths) -> dict:
    """Tag -> IdeaSet from every file in common/ideas (empty if there is none)."""
    idea_sets = {}
    if paths.ideas.exists():
        for _path, block in parse_all_in_directory(paths.ideas):
            idea_sets.update(parse_ideas(block))
    return idea_sets


def _modifiers_to_json(modifiers: dict) -> list:
    """Display rows for raw modifiers; unknown keys are left out."""
    rows = []
    for key, value in modifiers.items():
        localised = localise_strings(key, value)
        if localised is None:
            continue
        name, display = localised
        rows.append({'id': key, 'name': name, 'value': display})
    return rows


def extract_ideas(idea_sets: dict, localisations: dict) -> list:
    """One entry per idea set with a display name, sorted by set id."""
    print("Extracting national ideas...")

    unique = {idea_set.name: idea_set for idea_set in idea_sets.values()}
    result = []
    for set_id in sorted(unique):
        idea_set = unique[set_id]
        set_name = localise_idea_set(idea_set, localisations)
        if set_name is None:
            continue
        result.append({
            'id': set_id,
            'name': set_name,
            'tags': idea_set.tags,
            'traditions': _modifiers_to_json(idea_set.start),
            'ideas': [
                {
                    'id': idea.name,
                    'name': idea.title,
                    'desc': idea.description,
                    'effects': _modifiers_to_json(idea.effects),
                }
                for idea in idea_set.ideas
            ],
            'ambition': _modifiers_to_json(idea_set.bonus),
        })

    print(f"  Found {len(result)} idea sets")
    return result


def extract_countries(paths: settings.GamePaths, localisations: dict,
                      idea_sets: Optional[dict] = None) -> list:
    print("Extracting countries...")
    settings.require(paths.country_tags, paths.country_history, paths.scripted_triggers,
                     paths.decisions, paths.events)

    tags = []
    for filepath in list_files(paths.country_tags, "*.txt"):
        tags.extend(parse_country_tags(filepath.read_text(encoding='utf-8-sig', errors='replace')))

    histories = parse_country_histories(paths.country_history)
    end_game = end_game_tags(parse_file(paths.scripted_triggers))
    formable = formable_tags(read_definition_blocks([paths.decisions, paths.events]))

    if idea_sets is None:
        idea_sets = load_idea_sets(paths)

    countries = enrich_countries(tags, histories, localisations, end_game, formable, idea_sets)

    result = []
    for country in countries:
        data = asdict(country)
        data['ideas'] = country.ideas.name if country.ideas else None
        result.append(data)

    print(f"  Found {len(result)} countries ({len(end_game)} end-game tags, "
          f"{len(formable)} formable tags)")
    return result


def _reform_to_json(reform) -> dict:
    return {
        'id': reform.id,
        'name': reform.name or prettify_id(reform.id),
        'desc': reform.desc,
        'icon': reform.icon,
        'basic_reform': reform.basic_reform,
        'monarchy': reform.monarchy,
        'modifiers': _modifiers_to_json(reform.modifiers),
        'potential': reform.potential.to_python() if reform.potential is not None else None,
    }


def extract_governments(paths: settings.GamePaths, localisations: dict) -> tuple:
    print("Extracting governments...")
    settings.require(paths.governments, paths.government_reforms)

    governments = []
    for government in parse_governments(paths.governments):
        governments.append({
            'id': government.id,
            'name': localisations.get(government.id) or prettify_id(government.id),
            'basic_reform': government.basic_reform,
            'color': government.color,
            'reform_levels': [
                {'tier': tier, 'id': level.id, 'reforms': level.reforms}
                for tier, level in government.reform_levels.items()
            ],
        })

    reforms = [_reform_to_json(r)
               for r in parse_government_reforms(paths.government_reforms, localisations)]

    print(f"  Found {len(governments)} governments, {len(reforms)} reforms")
    return governments, reforms


def extract_missions(paths: settings.GamePaths) -> dict:
    print("Extracting missions...")
    settings.require(paths.missions)

    blocks = [block for _path, block in parse_all_in_directory(paths.missions)]
    trees = []
    for block in blocks:
        trees.extend(asdict(tree) for tree in parse_mission_file(block))
    tags = sorted(tags_with_missions(blocks))

    print(f"  Found {len(trees)} mission trees for {len(tags)} tags")
    return {'trees': trees, 'tags': tags}


def extract_events(paths: settings.GamePaths) -> list:
    print("Extracting events...")
    settings.require(paths.events)

    event_sets = [asdict(event_set) for event_set in parse_events(paths.events)]
    print(f"  Found {sum(len(s['events']) for s in event_sets)} events "
          f"in {len(event_sets)} files")
    return event_sets


def write_json(output_path: Path, filename: str, data: Any):
    filepath = output_path / filename
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    print(f"  Wrote {filepath}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--game-dir", help=f"game root (default: ${settings.GAME_PATH_ENV} "
                                           f"or ./{settings.DEFAULT_GAME_PATH})")
    parser.add_argument("--out", default=str(settings.DEFAULT_OUTPUT_PATH),
                        help="output directory for JSON files")
    parser.add_argument("--strict", action="store_true",
                        help="fail when a map entity is claimed by two parents")
    parser.add_argument("--verbose", "-v", action="store_true")
    for section in SECTIONS:
        parser.add_argument(f"--{section}", action="store_true",
                            help=f"extract {section} (default: everything)")
    return parser


def run(args: argparse.Namespace) -> dict:
    """Run the selected extractors and write their output."""
    paths = settings.GamePaths.from_env(args.game_dir)
    settings.require(paths.root, paths.localisation)

    selected = [s for s in SECTIONS if getattr(args, s)] or list(SECTIONS)

    print("=" * 60)
    print("anbwiki - Data Extraction")
    print("=" * 60)
    print()

    print("Loading localisation...")
    localisations = load_localisations(paths.localisation)
    print(f"  Found {len(localisations)} keys")

    outputs = {}
    if 'map' in selected:
        outputs['map.json'] = extract_map(paths, localisations, strict=args.strict)
    if 'countries' in selected:
        idea_sets = load_idea_sets(paths)
        outputs['countries.json'] = extract_countries(paths, localisations, idea_sets)
        outputs['ideas.json'] = extract_ideas(idea_sets, localisations)
    if 'governments' in selected:
        governments, reforms = extract_governments(paths, localisations)
        outputs['governments.json'] = governments
        outputs['reforms.json'] = reforms
    if 'missions' in selected:
        outputs['missions.json'] = extract_missions(paths)
    if 'events' in selected:
        outputs['events.json'] = extract_events(paths)

    print()
    print("Writing output files...")
    output_path = Path(args.out)
    output_path.mkdir(parents=True, exist_ok=True)
    for filename, data in outputs.items():
        write_json(output_path, filename, data)

    print()
    print("Done!")
    return outputs


def main(argv: Optional[list] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        run(args)
    except settings.MissingInputError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Required file could not be read: %s", e)
        return 1
    except HierarchyError as e:
        logger.error("Map assembly failed: %s", e)
        return 1
    except ParseError as e:
        logger.error("Required file could not be parsed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
