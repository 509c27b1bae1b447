import math
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from fifa_analyzer.core.errors import DataUnavailable, DuplicatePlayerId, NotFound


SEARCH_FIELDS = ("name", "club", "nation")


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a raw cell into a float.
    Returns None for blanks, NaN/inf, booleans and anything non-numeric,
    so missing data never turns into a zero.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def as_player_id(value: Any) -> Optional[int]:
    """
    Exact integer id for a lookup, or None.
    Booleans and non-integral numbers (1.7) never match a player.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    number = to_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


@dataclass(frozen=True)
class PlayerAttributes:
    id: int
    attributes: Mapping[str, Optional[float]]
    info: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any], schema: Iterable[str]) -> "PlayerAttributes":
        """
        Split one flat record into numeric attributes (names in schema)
        and display-only info (everything else).
        """
        schema = set(schema)
        if "id" not in record:
            raise ValueError("Player record has no 'id'")
        player_id = int(record["id"])

        attributes = {name: to_number(record.get(name)) for name in sorted(schema)}
        info = {k: v for k, v in record.items() if k != "id" and k not in schema}
        return cls(
            id=player_id,
            attributes=MappingProxyType(attributes),
            info=MappingProxyType(info),
        )

    @property
    def name(self) -> Optional[str]:
        return self.info.get("name")

    def value(self, attribute: str) -> Optional[float]:
        return self.attributes.get(attribute)

    def to_dict(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"id": self.id}
        record.update(self.info)
        record.update(self.attributes)
        return record


def infer_schema(records: Iterable[Mapping[str, Any]]) -> frozenset:
    """A key is a numeric attribute if at least one record holds a number for it."""
    schema = set()
    for record in records:
        for key, value in record.items():
            if key == "id" or isinstance(value, str):
                continue
            if to_number(value) is not None:
                schema.add(key)
    return frozenset(schema)


@dataclass(frozen=True)
class PlayerSnapshot:
    """
    Immutable population of players as loaded at one point in time.
    A reload builds a new snapshot instead of touching this one.
    """

    players: Tuple[PlayerAttributes, ...]
    schema: frozenset
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _by_id: Mapping[int, PlayerAttributes] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        by_id: Dict[int, PlayerAttributes] = {}
        for player in self.players:
            if player.id in by_id:
                raise DuplicatePlayerId(player.id)
            by_id[player.id] = player
        ## Frozen dataclass, so the index goes in via object.__setattr__.
        object.__setattr__(self, "_by_id", MappingProxyType(by_id))

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        schema: Optional[Iterable[str]] = None,
    ) -> "PlayerSnapshot":
        records = list(records)
        schema = frozenset(schema) if schema is not None else infer_schema(records)
        players = tuple(PlayerAttributes.from_record(r, schema) for r in records)
        return cls(players=players, schema=schema)

    @classmethod
    def from_players(cls, players: Iterable[PlayerAttributes]) -> "PlayerSnapshot":
        players = tuple(players)
        schema = set()
        for player in players:
            schema.update(player.attributes.keys())
        return cls(players=players, schema=frozenset(schema))

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[PlayerAttributes]:
        return iter(self.players)

    def __contains__(self, player_id: object) -> bool:
        return as_player_id(player_id) in self._by_id

    def get(self, player_id: int) -> PlayerAttributes:
        key = as_player_id(player_id)
        if key is None or key not in self._by_id:
            raise NotFound(player_id)
        return self._by_id[key]

    def search(self, term: Optional[str]) -> List[PlayerAttributes]:
        """
        Case-insensitive substring match on name, club or nation.
        An empty term returns every player.
        """
        needle = (term or "").strip().lower()
        if not needle:
            return list(self.players)
        matches = []
        for player in self.players:
            for key in SEARCH_FIELDS:
                value = player.info.get(key)
                if isinstance(value, str) and needle in value.lower():
                    matches.append(player)
                    break
        return matches


class PlayerStore:
    """
    Holds the current snapshot.

    Readers take `store.snapshot` once and keep working against it; `replace`
    only swaps the reference, so a reload never shows up mid-query.
    """

    def __init__(self, snapshot: Optional[PlayerSnapshot] = None):
        self._lock = threading.Lock()
        self._snapshot = snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> PlayerSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise DataUnavailable()
        return snapshot

    def replace(self, snapshot: PlayerSnapshot) -> PlayerSnapshot:
        """Publish a new snapshot and return the previous one (or None)."""
        with self._lock:
            previous = self._snapshot
            self._snapshot = snapshot
        return previous

    def clear(self) -> None:
        with self._lock:
            self._snapshot = None

    def get(self, player_id: int) -> PlayerAttributes:
        return self.snapshot.get(player_id)

    def all(self) -> List[PlayerAttributes]:
        return list(self.snapshot.players)


_STORE: Optional[PlayerStore] = None


def get_store() -> PlayerStore:
    global _STORE
    if _STORE is None:
        _STORE = PlayerStore()
    return _STORE
