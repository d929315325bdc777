from anbwiki.clausewitz import parse
from anbwiki.countries import (
    Country, CountryHistory, end_game_tags, enrich_countries, enrich_country,
    formable_tags, parse_country_histories, parse_country_history,
    parse_country_tags, parse_history_for_tag, read_definition_blocks,
)
from anbwiki.ideas import IdeaSet


def test_parse_country_tags():
    text = '\n'.join([
        'A01 = "countries/Lorent.txt"',
        '#A03 = "countries/Commented.txt"',
        'NPC = "countries/NPC.txt"',
        'A02="countries/Deranne.txt" # trailing comment',
        'dynamic_tags = yes',
    ])
    assert parse_country_tags(text) == [
        ('A01', 'countries/Lorent.txt'),
        ('A02', 'countries/Deranne.txt'),
    ]


def test_parse_country_history():
    history = parse_country_history(parse("""
        government = monarchy
        add_government_reform = feudalism_reform
        add_government_reform = lorentish_reform
        government_rank = 2
        primary_culture = high_lorentish
        add_accepted_culture = low_lorentish
        religion = regent_court
        capital = 67
        historical_rival = A02
        historical_rival = A03
        1444.11.11 = { religion = corinite }
    """))

    assert history.government == 'monarchy'
    assert history.government_reforms == ['feudalism_reform', 'lorentish_reform']
    assert history.government_rank == 2
    assert history.accepted_cultures == ['low_lorentish']
    assert history.religion == 'regent_court'
    assert history.capital == 67
    assert history.fixed_capital == 0
    assert history.historical_rivals == ['A02', 'A03']
    assert history.historical_friends == []
    assert history.setup_vision is False


def test_country_histories_by_filename(game_dir):
    directory = game_dir / "history" / "countries"

    histories = parse_country_histories(directory)

    assert sorted(histories) == ['A01', 'A02', 'C01']
    assert parse_history_for_tag(directory, 'A02').primary_culture == 'derannic'
    assert parse_history_for_tag(directory, 'Z99') is None


def test_end_game_tags():
    block = parse("""
        other_trigger = { tag = A01 }
        was_never_end_game_tag_trigger = {
            NOT = { tag = Z01 }
            NOT = { was_tag = Z02 }
        }
    """)
    assert end_game_tags(block) == {'Z01', 'Z02'}


def test_end_game_tags_without_trigger(caplog):
    assert end_game_tags(parse("other_trigger = { tag = A01 }")) == set()
    assert "was_never_end_game_tag_trigger" in caplog.text


def test_formable_tags():
    decisions = parse("""
        country_decisions = {
            form_z35 = {
                potential = { NOT = { tag = Z35 } }
                effect = { change_tag = Z35 }
            }
            unrelated = { effect = { add_prestige = 5 } }
        }
    """)
    events = parse("""
        namespace = test
        country_event = {
            id = test.1
            option = { change_tag = Z01 }
        }
    """)
    assert formable_tags([decisions, events]) == {'Z35', 'Z01'}


class TestEnrich:
    LOCALISATIONS = {
        'A01': 'Lorent',
        'A01_ADJ': 'Lorentish',
        'A02': 'Deranne',
        'B99': '',
        'high_lorentish': 'High Lorentish',
    }

    def test_tag_without_name_is_dropped(self):
        assert enrich_country(Country(tag='X01'), None, self.LOCALISATIONS, set(), set()) is None
        assert enrich_country(Country(tag='B99'), None, self.LOCALISATIONS, set(), set()) is None

    def test_culture_and_religion_fall_back_to_raw_id(self):
        history = CountryHistory(primary_culture='high_lorentish', religion='regent_court')

        country = enrich_country(Country(tag='A01'), history, self.LOCALISATIONS, set(), set())

        assert country.name == 'Lorent'
        assert country.adjective == 'Lorentish'
        assert country.history.primary_culture == 'High Lorentish'
        assert country.history.religion == 'regent_court'

    def test_flags_and_ideas(self):
        ideas = IdeaSet(name='A01_ideas', tags=['A01'])

        country = enrich_country(
            Country(tag='A01'), None, self.LOCALISATIONS,
            end_game={'A01'}, formable=set(), idea_sets={'A01': ideas},
        )

        assert country.end_game_tag is True
        assert country.formable is False
        assert country.ideas is ideas
        assert country.history == CountryHistory()

    def test_only_listed_tags_sorted(self):
        histories = {
            'A02': CountryHistory(government='monarchy'),
            'C01': CountryHistory(government='republic'),
        }

        countries = enrich_countries(
            [('A02', 'countries/Deranne.txt'), 'A01', 'B99'],
            histories, self.LOCALISATIONS, set(), {'A02'},
        )

        assert [c.tag for c in countries] == ['A01', 'A02']
        assert countries[1].history.government == 'monarchy'
        assert countries[1].formable is True


def test_read_definition_blocks(game_dir):
    blocks = read_definition_blocks([game_dir / "decisions", game_dir / "events"])
    assert len(blocks) == 3
    assert formable_tags(blocks) == {'Z35', 'Z01'}
