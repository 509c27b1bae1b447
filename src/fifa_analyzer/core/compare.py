from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np

from fifa_analyzer.core.similarity import (
    Population,
    as_snapshot,
    check_attribute_names,
    check_weights,
    weighted_euclidean_distance,
)
from fifa_analyzer.core.errors import InvalidAttribute
from fifa_analyzer.core.store import PlayerAttributes
from fifa_analyzer.data.attributes import COMPARISON_DETAIL_ATTRIBUTES, HEADLINE_ATTRIBUTES


@dataclass(frozen=True)
class AttributeComparison:
    attribute: str
    first: Optional[float]
    second: Optional[float]

    @property
    def difference(self) -> Optional[float]:
        ## first - second, positive when the first player rates higher.
        if self.first is None or self.second is None:
            return None
        return self.first - self.second

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attribute": self.attribute,
            "first": self.first,
            "second": self.second,
            "difference": self.difference,
        }


@dataclass(frozen=True)
class PlayerComparison:
    first: PlayerAttributes
    second: PlayerAttributes
    rows: List[AttributeComparison]
    distance: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "first": self.first.to_dict(),
            "second": self.second.to_dict(),
            "attributes": [row.to_dict() for row in self.rows],
            "distance": self.distance,
        }


def compare_players(
    population: Optional[Population],
    first_id: int,
    second_id: int,
    attribute_names: Optional[Iterable[str]] = None,
    weights: Optional[Sequence[float]] = None,
    detail: bool = False,
) -> PlayerComparison:
    """
    Side-by-side view of two players.

    Every requested attribute gets a row, even if one player is missing it.
    The distance only uses attributes present on both players and is None
    when they share none.

    Without explicit attribute names the headline six are used, followed by
    the eighteen detailed stats when `detail` is set. Default names the
    population does not carry are skipped; explicit unknown names raise.
    """
    snapshot = as_snapshot(population)
    if attribute_names is None:
        defaults = HEADLINE_ATTRIBUTES + (COMPARISON_DETAIL_ATTRIBUTES if detail else [])
        attribute_names = [name for name in defaults if name in snapshot.schema]
    names = check_attribute_names(attribute_names)
    w = check_weights(weights, len(names))

    first = snapshot.get(first_id)
    second = snapshot.get(second_id)

    for name in names:
        if name not in snapshot.schema:
            raise InvalidAttribute(name)

    rows = [AttributeComparison(name, first.value(name), second.value(name)) for name in names]

    shared = [i for i, row in enumerate(rows) if row.difference is not None]
    if not shared:
        return PlayerComparison(first=first, second=second, rows=rows, distance=None)

    a = np.asarray([rows[i].first for i in shared], dtype=float)
    b = np.asarray([rows[i].second for i in shared], dtype=float)
    distance = weighted_euclidean_distance(a, b, w[shared])
    return PlayerComparison(first=first, second=second, rows=rows, distance=distance)
