from anbwiki.clausewitz import parse
from anbwiki.ideas import Idea, localise_idea_set, parse_idea_set, parse_ideas


IDEAS = """
A01_ideas = {
    start = { discipline = 0.05 }
    bonus = { advisor_pool = 1 }
    trigger = { tag = A01 }
    free = yes
    A01_romance = { prestige = 1 }
    A01_knights = {
        cavalry_power = 0.1
        if = { limit = { tag = A01 } }
    }
}
shared_ideas = {
    trigger = { OR = { tag = B01 TAG = B02 } }
    category = ADM
    shared_first = { tolerance_own = 1 }
}
"""


def test_parse_idea_set():
    block = parse(IDEAS).first('A01_ideas')

    idea_set = parse_idea_set('A01_ideas', block)

    assert idea_set.tags == ['A01']
    assert idea_set.start == {'discipline': '0.05'}
    assert idea_set.bonus == {'advisor_pool': '1'}
    assert idea_set.ideas == [
        Idea(name='A01_romance', effects={'prestige': '1'}),
        Idea(name='A01_knights', effects={'cavalry_power': '0.1'}),
    ]


def test_parse_ideas_keyed_by_every_tag():
    idea_sets = parse_ideas(parse(IDEAS))

    assert sorted(idea_sets) == ['A01', 'B01', 'B02']
    assert idea_sets['B01'] is idea_sets['B02']
    assert [idea.name for idea in idea_sets['B01'].ideas] == ['shared_first']


def test_localise_idea_set():
    idea_set = parse_ideas(parse(IDEAS))['A01']
    localisations = {
        'A01_ideas': 'Lorentish Ideas',
        'A01_romance': 'Lorentish Romance',
        'A01_romance_desc': 'Songs of the Rose Court.',
    }

    assert localise_idea_set(idea_set, localisations) == 'Lorentish Ideas'
    assert [(i.title, i.description) for i in idea_set.ideas] == [
        ('Lorentish Romance', 'Songs of the Rose Court.'),
        ('A01_knights', ''),
    ]


def test_idea_set_without_display_name():
    idea_set = parse_ideas(parse(IDEAS))['B01']
    assert localise_idea_set(idea_set, {'shared_ideas': ''}) is None
