import pytest

from fifa_analyzer.core.errors import InvalidPlayerData
from fifa_analyzer.core.similarity import find_similar
from fifa_analyzer.data.loader import load_snapshot, read_players_csv


def test_headers_renamed_to_snake_case(players_csv):
    df = read_players_csv(players_csv)

    for col in ("id", "name", "weak_foot", "sprint_speed", "def_aware", "dribbling", "dribbling_stat"):
        assert col in df.columns


def test_second_dribbling_header_is_the_detailed_stat(players_csv):
    snapshot = load_snapshot(players_csv)
    alpha = snapshot.get(1)

    assert alpha.value("dribbling") == 85.0
    assert alpha.value("dribbling_stat") == 86.0


def test_bad_ids_and_repeats_are_dropped(players_csv):
    snapshot = load_snapshot(players_csv)

    assert sorted(p.id for p in snapshot) == [1, 2, 3, 4]
    ## First row wins for a repeated id.
    assert snapshot.get(1).name == "Alpha"


def test_blank_and_garbage_values_become_missing(players_csv):
    snapshot = load_snapshot(players_csv)

    assert snapshot.get(3).value("pace") is None
    assert snapshot.get(4).value("pace") is None
    assert snapshot.get(3).value("shooting") == 60.0


def test_schema_only_lists_columns_present(players_csv):
    snapshot = load_snapshot(players_csv)

    assert "pace" in snapshot.schema
    assert "curve" not in snapshot.schema
    assert "name" not in snapshot.schema


def test_missing_pace_players_are_skipped_in_search(players_csv):
    snapshot = load_snapshot(players_csv)
    results = find_similar(snapshot, 1, ["pace", "shooting"])

    assert [r.id for r in results] == [2]


def test_info_fields_survive(players_csv):
    beta = load_snapshot(players_csv).get(2)

    assert beta.info["club"] == "Club B"
    assert beta.info["nation"] == "Spain"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_snapshot(tmp_path / "nope.csv")


def test_csv_without_id_column(tmp_path):
    path = tmp_path / "no_id.csv"
    path.write_text("Name,Pace\nA,80\n", encoding="utf-8")

    with pytest.raises(InvalidPlayerData) as excinfo:
        read_players_csv(path)

    assert "ID column" in str(excinfo.value)


def test_empty_csv(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(InvalidPlayerData):
        load_snapshot(path)
