"""Shared fixtures: a small but complete game directory on disk."""

from pathlib import Path

import pytest


GAME_FILES = {
    "map/area.txt": """
adenica_area = { 1 2 }
lorent_area = {
	color = { 10 20 30 }
	3 4
}
empty_area = { }
orphan_area = { 9 }
""",
    "map/region.txt": """
r1 = { areas = { adenica_area lorent_area } }
r2 = { areas = { missing_area } }
r3 = { areas = { empty_area } }
""",
    "map/superregion.txt": """
sr1 = { r1 restrict_charter }
sr2 = { r2 }
""",
    "map/continent.txt": """
europe = { 1 2 3 4 }
""",
    "history/provinces/1 - Adenica.txt": """
owner = A01
culture = high_lorentish
base_tax = 3
trade_goods = grain
1500.1.1 = { owner = A02 }
trade_goods = wine
""",
    "history/provinces/2-Blayscrest.txt": """
owner = A01
is_city = yes
""",
    "history/provinces/notes.txt": """
owner = A01
""",
    "localisation/test_l_english.yml": """l_english:
 PROV1:0 "Adenica"
 PROV2:0 "Blayscrest"
 PROV_ADJ1:0 "Adenican"
 adenica_area_name:0 "Adenica Area"
 r1_name:0 "Lencenor"
 sr1:0 "Western Cannor"
 europe:0 "Cannor"
 A01:0 "Lorent"
 A01_ADJ:0 "Lorentish"
 A02:0 "Deranne"
 Z01:0 "Empire of Anbennar"
 B99:0 ""
 high_lorentish:0 "High Lorentish"
 regent_court:0 "Regent Court"
 monarchy:0 "Monarchy"
 feudalism_reform:0 "Feudal Monarchy"
 feudalism_reform_desc:0 "Power rests with the nobility."
 A01_ideas:0 "Lorentish Ideas"
 A01_romance:0 "Lorentish Romance"
 A01_romance_desc:0 "Songs of the Rose Court."
""",
    "common/country_tags/00_countries.txt": """
A01 = "countries/Lorent.txt"
A02 = "countries/Deranne.txt"
#A03 = "countries/Commented.txt"
NPC = "countries/NPC.txt"
Z01 = "countries/Anbennar.txt"
B99 = "countries/Dummy.txt"
""",
    "history/countries/A01 - Lorent.txt": """
government = monarchy
add_government_reform = feudalism_reform
add_government_reform = lorentish_reform
government_rank = 2
primary_culture = high_lorentish
add_accepted_culture = low_lorentish
religion = regent_court
technology_group = tech_cannorian
capital = 67
historical_rival = A02
historical_friend = A04
1444.11.11 = { religion = corinite }
""",
    "history/countries/A02 - Deranne.txt": """
government = monarchy
primary_culture = derannic
religion = regent_court
""",
    "history/countries/C01 - Ghost.txt": """
government = republic
""",
    "common/scripted_triggers/00_scripted_triggers.txt": """
was_never_end_game_tag_trigger = {
	NOT = { tag = Z01 }
	NOT = { was_tag = Z02 }
}
other_trigger = { tag = A01 }
""",
    "decisions/formables.txt": """
country_decisions = {
	form_z35 = {
		potential = { NOT = { tag = Z35 } }
		provinces_to_highlight = { owned_by = Z36 }
		effect = { change_tag = Z35 }
	}
}
""",
    "events/anb_events.txt": """
namespace = anb_events
country_event = {
	id = anb_events.1
	title = anb_events.1.t
	title = anb_events.1.t2
	option = { name = anb_events.1.a change_tag = Z01 }
}
""",
    "events/empty_events.txt": """
namespace = nothing_here
""",
    "missions/A01_Missions.txt": """
lorent_missions = {
	slot = 1
	generic = no
	ai = yes
	has_country_shield = yes
	potential = { tag = A01 NOT = { tag = A02 } }
	lorent_first = {
		icon = mission_cannor
		position = 1
		required_missions = { }
		trigger = { adm = 3 }
		effect = { add_prestige = 10 }
	}
	lorent_second = {
		position = 2
		required_missions = { lorent_first }
	}
	not_a_mission = { icon = foo }
}
""",
    "common/governments/00_governments.txt": """
monarchy = {
	basic_reform = monarchy_mechanic
	color = { 200 50 50 }
	reform_levels = {
		power_centralization = { reforms = { feudalism_reform autocracy_reform } }
		succession = { reforms = { hereditary } }
	}
}
""",
    "common/government_reforms/00_reforms.txt": """
defaults_reform = { potential = { } }
feudalism_reform = {
	icon = "feudal"
	basic_reform = yes
	monarchy = yes
	potential = { has_dlc = "Dharma" }
	modifiers = { discipline = 0.05 made_up_modifier = 1 advisor_pool = -1 }
}
""",
    "common/ideas/00_country_ideas.txt": """
A01_ideas = {
	start = { discipline = 0.05 }
	bonus = { advisor_pool = 1 }
	trigger = { tag = A01 }
	free = yes
	A01_romance = { prestige = 1 made_up_modifier = 1 }
	A01_knights = { cavalry_power = 0.1 }
}
B01_ideas = {
	trigger = { tag = B01 }
	B01_first = { prestige = 1 }
}
""",
}


def write_files(root: Path, files: dict) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def game_dir(tmp_path: Path) -> Path:
    return write_files(tmp_path / "game", GAME_FILES)
