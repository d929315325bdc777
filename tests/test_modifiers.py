import pytest

from anbwiki.modifiers import (
    FLAT, MODIFIERS, NEGATIVE, NONE, PERCENT, POSITIVE,
    Modifier, get_modifier, localise_strings,
)


@pytest.mark.parametrize("modifier, amount, expected", [
    (Modifier('discipline', 'Discipline', PERCENT, POSITIVE, 100), 0.1, '+10%'),
    (Modifier('discipline', 'Discipline', PERCENT, POSITIVE, 100), -0.05, '-5%'),
    (Modifier('discipline', 'Discipline', PERCENT, POSITIVE, 100), 0.125, '+13%'),
    (Modifier('discipline', 'Discipline', PERCENT, POSITIVE, 100), 0, '+0%'),
    (Modifier('reduced_liberty_desire', 'Liberty Desire', PERCENT, POSITIVE, 1), 10, '-10%'),
    (Modifier('reduced_liberty_desire', 'Liberty Desire', PERCENT, POSITIVE, 1), -10, '+10%'),
    (Modifier('advisor_pool', 'Possible Advisors', FLAT, POSITIVE, 1), 10, '+10'),
    (Modifier('army_tradition', 'Yearly Army Tradition', FLAT, POSITIVE, 1), 0.25, '+0.25'),
    (Modifier('can_fabricate_for_vassals', 'Fabricate', NONE, POSITIVE, 1), 1, ''),
])
def test_to_human_readable(modifier, amount, expected):
    assert modifier.to_human_readable(amount) == expected


def test_is_beneficial():
    assert get_modifier('discipline').is_beneficial(0.05)
    assert not get_modifier('discipline').is_beneficial(-0.05)
    assert get_modifier('advisor_cost').is_beneficial(-0.1)
    assert not get_modifier('advisor_cost').is_beneficial(0.1)
    assert get_modifier('reduced_liberty_desire').is_beneficial(10)


def test_lookup_is_case_insensitive():
    assert get_modifier('DISCIPLINE') is MODIFIERS['discipline']
    assert get_modifier('not_a_modifier') is None


def test_table_is_read_only():
    with pytest.raises(TypeError):
        MODIFIERS['discipline'] = None


def test_table_rows():
    advisor_cost = MODIFIERS['advisor_cost']
    assert (advisor_cost.format, advisor_cost.normal, advisor_cost.multiplier) == (
        PERCENT, NEGATIVE, 100)
    assert all(key == modifier.id for key, modifier in MODIFIERS.items())


@pytest.mark.parametrize("key, value, expected", [
    ('discipline', '0.05', ('Discipline', '+5%')),
    ('advisor_pool', '-1', ('Possible Advisors', '-1')),
    ('Discipline', '0.1', ('Discipline', '+10%')),
    ('discipline', 'scaled_value', ('Discipline', 'scaled_value')),
    ('made_up_modifier', '1', None),
])
def test_localise_strings(key, value, expected):
    assert localise_strings(key, value) == expected


@pytest.mark.parametrize("key, expected", [
    ('discipline', '+10%'),
    ('reduced_liberty_desire', '-10%'),
])
def test_percent_of_tenth_with_and_without_inversion(key, expected):
    modifier = Modifier(key, 'Test', PERCENT, POSITIVE, 100)
    assert modifier.to_human_readable(0.10) == expected
