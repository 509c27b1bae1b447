import math
import threading

import numpy as np
import pytest

from fifa_analyzer.core.errors import DataUnavailable, DuplicatePlayerId, NotFound
from fifa_analyzer.core.similarity import find_similar
from fifa_analyzer.core.store import (
    PlayerSnapshot,
    PlayerStore,
    infer_schema,
    to_number,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (85, 85.0),
        (np.int64(7), 7.0),
        (" 72 ", 72.0),
        (None, None),
        ("", None),
        ("n/a", None),
        (float("nan"), None),
        (math.inf, None),
        (True, None),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_infer_schema_keeps_numeric_keys_only():
    records = [
        {"id": 1, "name": "A", "pace": 80, "age": "25"},
        {"id": 2, "name": "B", "pace": None, "curve": 70},
    ]

    assert infer_schema(records) == frozenset({"pace", "curve"})


def test_record_split_into_attributes_and_info():
    snapshot = PlayerSnapshot.from_records(
        [{"id": "5", "name": "Pedri", "club": "Barcelona", "pace": 75, "vision": "89"}],
        schema=["pace", "vision"],
    )
    player = snapshot.get(5)

    assert player.id == 5
    assert player.name == "Pedri"
    assert dict(player.attributes) == {"pace": 75.0, "vision": 89.0}
    assert player.info["club"] == "Barcelona"


def test_attributes_are_read_only(scenario_population):
    player = scenario_population.get(1)

    with pytest.raises(TypeError):
        player.attributes["pace"] = 0


def test_duplicate_ids_rejected():
    with pytest.raises(DuplicatePlayerId):
        PlayerSnapshot.from_records([{"id": 1, "pace": 1}, {"id": 1, "pace": 2}])


def test_get_unknown_or_malformed_id(scenario_population):
    with pytest.raises(NotFound):
        scenario_population.get(42)
    with pytest.raises(NotFound):
        scenario_population.get("abc")
    with pytest.raises(NotFound):
        scenario_population.get(1.7)
    with pytest.raises(NotFound):
        scenario_population.get(True)

    assert 1.7 not in scenario_population
    assert True not in scenario_population
    assert scenario_population.get(1.0).id == 1
    assert np.int64(2) in scenario_population


def test_search_matches_name_club_or_nation(squad):
    assert [p.id for p in squad.search("real")] == [10, 11]
    assert [p.id for p in squad.search("BRAZIL")] == [11, 15]
    assert [p.id for p in squad.search("virg")] == [13]
    assert len(squad.search("")) == len(squad)
    assert squad.search("nobody") == []


def test_empty_store_is_unavailable():
    store = PlayerStore()

    assert not store.is_loaded
    with pytest.raises(DataUnavailable):
        store.snapshot
    with pytest.raises(DataUnavailable):
        store.all()


def test_replace_publishes_new_snapshot_and_keeps_old_one_intact(scenario_population, squad):
    store = PlayerStore(scenario_population)
    held = store.snapshot

    previous = store.replace(squad)

    assert previous is scenario_population
    assert store.snapshot is squad
    ## A reader that grabbed the old snapshot still sees the old players.
    assert [p.id for p in held] == [1, 2, 3]
    assert [r.id for r in find_similar(held, 1, ["pace", "shooting"])] == [2, 3]


def test_clear_unloads(scenario_population):
    store = PlayerStore(scenario_population)
    store.clear()

    assert not store.is_loaded


def test_concurrent_queries_during_reload(scenario_population, squad):
    store = PlayerStore(scenario_population)
    errors = []

    def reader():
        for _ in range(200):
            snapshot = store.snapshot
            ids = [p.id for p in snapshot]
            if ids not in ([1, 2, 3], [10, 11, 12, 13, 14, 15]):
                errors.append(ids)

    def writer():
        for i in range(200):
            store.replace(squad if i % 2 else scenario_population)

    threads = [threading.Thread(target=reader) for _ in range(4)]
    threads.append(threading.Thread(target=writer))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
