"""Shared fixtures: small hand-built player pools and a CSV export on disk."""

import pytest

from fifa_analyzer.core.store import PlayerSnapshot


CSV_HEADER = (
    "ID,Name,Club,Nation,League,Skills,Weak Foot,Pace,Shooting,Passing,"
    "Dribbling,Defending,Physical,Sprint Speed,Def. Aware,Dribbling"
)


@pytest.fixture
def scenario_population():
    """Three players where 1 and 2 are identical on pace/shooting."""
    return PlayerSnapshot.from_records([
        {"id": 1, "name": "Reference", "pace": 90, "shooting": 80},
        {"id": 2, "name": "Twin", "pace": 90, "shooting": 80},
        {"id": 3, "name": "Slow", "pace": 50, "shooting": 50},
    ])


@pytest.fixture
def squad():
    """Six-attribute pool with a tie, a missing value and a far outlier."""
    records = [
        {"id": 10, "name": "Kylian", "club": "Real Madrid", "nation": "France",
         "pace": 97, "shooting": 90, "passing": 80, "dribbling": 92, "defending": 36, "physical": 78},
        {"id": 11, "name": "Vinicius", "club": "Real Madrid", "nation": "Brazil",
         "pace": 95, "shooting": 84, "passing": 81, "dribbling": 91, "defending": 29, "physical": 69},
        {"id": 12, "name": "Leao", "club": "AC Milan", "nation": "Portugal",
         "pace": 95, "shooting": 84, "passing": 81, "dribbling": 91, "defending": 29, "physical": 69},
        {"id": 13, "name": "Virgil", "club": "Liverpool", "nation": "Netherlands",
         "pace": 78, "shooting": 60, "passing": 71, "dribbling": 72, "defending": 90, "physical": 86},
        {"id": 14, "name": "Unknown Pace", "club": "Arsenal", "nation": "England",
         "pace": None, "shooting": 88, "passing": 80, "dribbling": 90, "defending": 40, "physical": 70},
        {"id": 15, "name": "Keeper", "club": "Liverpool", "nation": "Brazil",
         "pace": 50, "shooting": 20, "passing": 55, "dribbling": 40, "defending": 30, "physical": 80},
    ]
    return PlayerSnapshot.from_records(records)


@pytest.fixture
def players_csv(tmp_path):
    """A futbin-style export with a duplicated Dribbling header and a few bad rows."""
    rows = [
        CSV_HEADER,
        "1,Alpha,Club A,France,Ligue 1,4,3,90,80,75,85,40,70,92,35,86",
        "2,Beta,Club B,Spain,LaLiga,3,4,88,78,76,84,42,71,90,38,85",
        "3,Gamma,Club C,Brazil,Serie A,2,2,,60,70,65,80,85,55,82,64",
        "4,Delta,Club D,Germany,Bundesliga,3,3,n/a,61,71,66,81,84,57,83,63",
        "x,Broken,Club E,Italy,Serie A,3,3,70,70,70,70,70,70,70,70,70",
        "1,Alpha Dupe,Club A,France,Ligue 1,4,3,10,10,10,10,10,10,10,10,10",
    ]
    path = tmp_path / "player_stats.csv"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path
