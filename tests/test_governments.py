from anbwiki.clausewitz import Block, parse
from anbwiki.governments import (
    parse_government, parse_government_reform_file, parse_government_reforms,
    parse_governments,
)


def test_parse_government():
    governments = parse_government(parse("""
        monarchy = {
            basic_reform = monarchy_mechanic
            color = { 200 50 50 }
            reform_levels = {
                power_centralization = { reforms = { feudalism_reform autocracy_reform } }
                succession = { reforms = { hereditary } }
            }
        }
        theocracy = { }
    """))

    assert [g.id for g in governments] == ['monarchy', 'theocracy']
    monarchy = governments[0]
    assert monarchy.basic_reform == 'monarchy_mechanic'
    assert monarchy.color == [200, 50, 50]
    assert list(monarchy.reform_levels) == [1, 2]
    assert monarchy.reform_levels[1].id == 'power_centralization'
    assert monarchy.reform_levels[1].reforms == ['feudalism_reform', 'autocracy_reform']
    assert monarchy.reform_levels[2].reforms == ['hereditary']
    assert governments[1].reform_levels == {}


def test_parse_government_reform_file():
    localisations = {'feudalism_reform': 'Feudal Monarchy', 'feudalism_reform_desc': 'Nobles.'}

    reforms = parse_government_reform_file(parse("""
        defaults_reform = { potential = { } }
        feudalism_reform = {
            icon = "feudal"
            basic_reform = yes
            monarchy = yes
            potential = { has_dlc = "Dharma" }
            modifiers = { discipline = 0.05 made_up_modifier = 1 advisor_pool = -1 }
        }
        bare_reform = { }
    """), localisations)

    assert [r.id for r in reforms] == ['feudalism_reform', 'bare_reform']
    feudal = reforms[0]
    assert (feudal.name, feudal.desc, feudal.icon) == ('Feudal Monarchy', 'Nobles.', 'feudal')
    assert feudal.basic_reform is True
    assert feudal.monarchy is True
    assert feudal.potential == Block([('has_dlc', '=', 'Dharma')])
    assert feudal.modifiers == {'discipline': '0.05', 'advisor_pool': '-1'}

    bare = reforms[1]
    assert bare.name is None
    assert bare.monarchy is None
    assert bare.modifiers == {}


def test_reform_without_localisations():
    reforms = parse_government_reform_file(parse("x_reform = { icon = x }"))
    assert reforms[0].name is None
    assert reforms[0].icon == 'x'


def test_directories(game_dir):
    governments = parse_governments(game_dir / "common" / "governments")
    reforms = parse_government_reforms(game_dir / "common" / "government_reforms", {})

    assert [g.id for g in governments] == ['monarchy']
    assert [r.id for r in reforms] == ['feudalism_reform']
