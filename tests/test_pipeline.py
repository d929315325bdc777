import json

from anbwiki.pipeline import main


def _load(path):
    with open(path, encoding='utf-8') as f:
        return json.load(f)


def test_full_run(game_dir, tmp_path):
    out = tmp_path / "out"

    assert main(["--game-dir", str(game_dir), "--out", str(out)]) == 0

    assert sorted(p.name for p in out.iterdir()) == [
        'countries.json', 'events.json', 'governments.json', 'ideas.json',
        'map.json', 'missions.json', 'reforms.json',
    ]


def test_map_output(game_dir, tmp_path):
    out = tmp_path / "out"
    main(["--game-dir", str(game_dir), "--out", str(out), "--map"])

    data = _load(out / "map.json")

    assert [sr['id'] for sr in data['superregions']] == ['sr1']
    sr1 = data['superregions'][0]
    assert sr1['name'] == 'Western Cannor'
    assert sr1['restrict_charter'] is True
    assert [r['name'] for r in sr1['regions']] == ['Lencenor']
    assert [a['provinces'] for a in sr1['regions'][0]['areas']] == [[1, 2], [3, 4]]

    provinces = data['provinces']
    assert [p['id'] for p in provinces] == [1, 2, 3, 4]
    assert provinces[0]['name'] == 'Adenica'
    assert provinces[0]['adjective'] == 'Adenican'
    assert provinces[0]['continent'] == 'Cannor'
    assert provinces[0]['area'] == 'Adenica Area'
    assert provinces[0]['history']['trade_goods'] == 'wine'
    assert provinces[2]['history'] is None
    assert sorted(p.name for p in out.iterdir()) == ['map.json']


def test_countries_output(game_dir, tmp_path):
    out = tmp_path / "out"
    main(["--game-dir", str(game_dir), "--out", str(out), "--countries"])

    countries = _load(out / "countries.json")

    assert [c['tag'] for c in countries] == ['A01', 'A02', 'Z01']
    lorent, deranne, anbennar = countries
    assert lorent['name'] == 'Lorent'
    assert lorent['adjective'] == 'Lorentish'
    assert lorent['ideas'] == 'A01_ideas'
    assert lorent['history']['primary_culture'] == 'High Lorentish'
    assert lorent['history']['religion'] == 'Regent Court'
    assert lorent['history']['government_reforms'] == ['feudalism_reform', 'lorentish_reform']
    assert deranne['history']['primary_culture'] == 'derannic'
    assert deranne['ideas'] is None
    assert (anbennar['end_game_tag'], anbennar['formable']) == (True, True)
    assert (lorent['end_game_tag'], lorent['formable']) == (False, False)


def test_governments_missions_events_output(game_dir, tmp_path):
    out = tmp_path / "out"
    main(["--game-dir", str(game_dir), "--out", str(out),
          "--governments", "--missions", "--events"])

    governments = _load(out / "governments.json")
    assert governments[0]['name'] == 'Monarchy'
    assert [level['tier'] for level in governments[0]['reform_levels']] == [1, 2]

    reforms = _load(out / "reforms.json")
    assert reforms[0]['name'] == 'Feudal Monarchy'
    assert reforms[0]['potential'] == {'has_dlc': 'Dharma'}
    assert reforms[0]['modifiers'] == [
        {'id': 'discipline', 'name': 'Discipline', 'value': '+5%'},
        {'id': 'advisor_pool', 'name': 'Possible Advisors', 'value': '-1'},
    ]

    missions = _load(out / "missions.json")
    assert missions['tags'] == ['A01']
    assert [m['id'] for m in missions['trees'][0]['missions']] == ['lorent_first', 'lorent_second']

    events = _load(out / "events.json")
    assert events == [{
        'source': 'anb_events',
        'events': [{'id': 'anb_events.1', 'title': 'anb_events.1.t2'}],
    }]


def test_missing_game_dir(tmp_path, caplog):
    assert main(["--game-dir", str(tmp_path / "missing"), "--out", str(tmp_path / "out")]) == 1
    assert "Missing required input" in caplog.text
    assert not (tmp_path / "out").exists()


def test_strict_mode_fails_on_double_claim(game_dir, tmp_path, caplog):
    (game_dir / "map" / "region.txt").write_text(
        "r1 = { areas = { adenica_area } }\nr2 = { areas = { adenica_area } }\n",
        encoding="utf-8")
    (game_dir / "map" / "superregion.txt").write_text("sr1 = { r1 r2 }\n", encoding="utf-8")
    args = ["--game-dir", str(game_dir), "--out", str(tmp_path / "out"), "--map"]

    assert main(args) == 0
    assert main(args + ["--strict"]) == 1
    assert "already claimed" in caplog.text


def test_ideas_output(game_dir, tmp_path):
    out = tmp_path / "out"
    main(["--game-dir", str(game_dir), "--out", str(out), "--countries"])

    ideas = _load(out / "ideas.json")

    # B01_ideas has no display name
    assert [s['id'] for s in ideas] == ['A01_ideas']
    lorentish = ideas[0]
    assert lorentish['name'] == 'Lorentish Ideas'
    assert lorentish['tags'] == ['A01']
    assert lorentish['traditions'] == [{'id': 'discipline', 'name': 'Discipline', 'value': '+5%'}]
    assert lorentish['ambition'] == [
        {'id': 'advisor_pool', 'name': 'Possible Advisors', 'value': '+1'},
    ]
    assert lorentish['ideas'] == [
        {
            'id': 'A01_romance',
            'name': 'Lorentish Romance',
            'desc': 'Songs of the Rose Court.',
            'effects': [{'id': 'prestige', 'name': 'Yearly Prestige', 'value': '+1'}],
        },
        {
            'id': 'A01_knights',
            'name': 'A01_knights',
            'desc': '',
            'effects': [{'id': 'cavalry_power', 'name': 'Cavalry Combat Ability', 'value': '+10%'}],
        },
    ]


def test_broken_continent_file_is_skipped(game_dir, tmp_path, caplog):
    (game_dir / "map" / "continent.txt").write_text("europe = { 1 2 ", encoding="utf-8")
    out = tmp_path / "out"

    assert main(["--game-dir", str(game_dir), "--out", str(out), "--map"]) == 0

    provinces = _load(out / "map.json")['provinces']
    assert [p['id'] for p in provinces] == [1, 2, 3, 4]
    assert all(p['continent'] == '' for p in provinces)
    assert "Ignoring continents" in caplog.text


def test_unreadable_required_file(game_dir, tmp_path, caplog):
    area_file = game_dir / "map" / "area.txt"
    area_file.unlink()
    area_file.mkdir()

    assert main(["--game-dir", str(game_dir), "--out", str(tmp_path / "out"), "--map"]) == 1
    assert "Required file could not be read" in caplog.text
