"""Nearest-neighbour search over player attributes.

Distances are weighted Euclidean over a chosen subset of numeric attributes:

    distance = sqrt(sum_i w_i * (ref_i - cand_i) ** 2)

Candidates missing any selected attribute are left out rather than treated
as zero. Repeated attribute names are kept, so each repeat adds its term
again (a name listed twice counts double).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import numpy as np

from fifa_analyzer.core.errors import (
    DataUnavailable,
    EmptyAttributeSet,
    InvalidAttribute,
    InvalidLimit,
    InvalidWeights,
)
from fifa_analyzer.core.store import PlayerAttributes, PlayerSnapshot, to_number
from fifa_analyzer.data.attributes import DEFAULT_SIMILARITY_ATTRIBUTES


DEFAULT_LIMIT = 10

Population = Union[PlayerSnapshot, Iterable[PlayerAttributes]]


@dataclass(frozen=True)
class SimilarityResult:
    player: PlayerAttributes
    distance: float

    @property
    def id(self) -> int:
        return self.player.id

    def to_dict(self) -> Dict[str, Any]:
        record = self.player.to_dict()
        record["distance"] = self.distance
        return record


@dataclass
class SimilarityRequest:
    reference_id: int
    attribute_names: List[str] = field(
        default_factory=lambda: list(DEFAULT_SIMILARITY_ATTRIBUTES)
    )
    weights: Optional[Sequence[float]] = None
    limit: int = DEFAULT_LIMIT

    def execute(self, population: Optional[Population]) -> List[SimilarityResult]:
        return find_similar(
            population,
            self.reference_id,
            self.attribute_names,
            weights=self.weights,
            limit=self.limit,
        )


def weighted_euclidean_distance(
    a: np.ndarray, b: np.ndarray, weights: Optional[np.ndarray] = None
) -> float:
    """
    Weighted Euclidean distance between two 1D vectors.
    Smaller = more similar.
    """
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    if weights is None:
        return float(np.sqrt(np.sum(diff ** 2)))
    return float(np.sqrt(np.sum(np.asarray(weights, dtype=float) * diff ** 2)))


def parse_attribute_names(raw: Union[None, str, Iterable[str]]) -> List[str]:
    """
    Accepts "pace,shooting" or ["pace", "shooting"].
    None means the headline six; an empty string means no attributes at all.
    """
    if raw is None:
        return list(DEFAULT_SIMILARITY_ATTRIBUTES)
    if isinstance(raw, str):
        parts = raw.split(",")
    else:
        parts = []
        for item in raw:
            parts.extend(str(item).split(","))
    return [p.strip() for p in parts if p.strip()]


def parse_weights(raw: Union[None, str, Iterable[Any]]) -> Optional[List[float]]:
    if raw is None:
        return None
    parts = raw.split(",") if isinstance(raw, str) else list(raw)
    weights = []
    for part in parts:
        value = to_number(part)
        if value is None:
            raise InvalidWeights(f"weight is not a number: {part!r}")
        weights.append(value)
    return weights


def as_snapshot(population: Optional[Population]) -> PlayerSnapshot:
    if population is None:
        raise DataUnavailable()
    if isinstance(population, PlayerSnapshot):
        return population
    return PlayerSnapshot.from_players(population)


def check_attribute_names(attribute_names: Optional[Iterable[str]]) -> List[str]:
    if attribute_names is None:
        raise EmptyAttributeSet()
    if isinstance(attribute_names, str):
        attribute_names = [attribute_names]
    names = list(attribute_names)
    if not names:
        raise EmptyAttributeSet()
    return names


def check_limit(limit: Any) -> int:
    if isinstance(limit, (bool, np.bool_)) or not isinstance(limit, (int, np.integer)):
        raise InvalidLimit(f"limit must be a positive integer, got {limit!r}")
    if limit < 1:
        raise InvalidLimit(f"limit must be a positive integer, got {limit!r}")
    return int(limit)


def check_weights(weights: Optional[Sequence[Any]], n_attributes: int) -> np.ndarray:
    if weights is None:
        return np.ones(n_attributes, dtype=float)
    if isinstance(weights, str):
        raise InvalidWeights(
            f"weights must be a sequence of numbers, got the string {weights!r}; "
            "use parse_weights for comma-separated input"
        )
    weights = list(weights)
    if len(weights) != n_attributes:
        raise InvalidWeights(
            f"expected {n_attributes} weights, one per attribute, got {len(weights)}"
        )
    checked = []
    for raw in weights:
        value = to_number(raw) if not isinstance(raw, str) else None
        if value is None or value <= 0:
            raise InvalidWeights(f"weights must be positive numbers, got {raw!r}")
        checked.append(value)
    return np.asarray(checked, dtype=float)


def reference_vector(
    reference: PlayerAttributes, attribute_names: Sequence[str], schema: Iterable[str]
) -> np.ndarray:
    """
    Resolve every selected attribute on the reference.
    Raises InvalidAttribute on the first name outside the schema or
    without a numeric value on the reference.
    """
    schema = set(schema)
    values = []
    for name in attribute_names:
        if name not in schema:
            raise InvalidAttribute(name)
        value = reference.value(name)
        if value is None:
            raise InvalidAttribute(name, f"no numeric value for player {reference.id}")
        values.append(value)
    return np.asarray(values, dtype=float)


def find_similar(
    population: Optional[Population],
    reference_id: int,
    attribute_names: Optional[Iterable[str]],
    weights: Optional[Sequence[float]] = None,
    limit: int = DEFAULT_LIMIT,
) -> List[SimilarityResult]:
    """
    Rank every other player by weighted Euclidean distance to the reference.

    Returns at most `limit` results, ordered by (distance, id). The population
    is only read, never modified.

    Raises:
        DataUnavailable: population is None
        EmptyAttributeSet: no attribute names given
        InvalidLimit / InvalidWeights: malformed limit or weights
        NotFound: reference_id is not in the population
        InvalidAttribute: unknown name or non-numeric on the reference
    """
    snapshot = as_snapshot(population)
    names = check_attribute_names(attribute_names)
    limit = check_limit(limit)
    w = check_weights(weights, len(names))

    reference = snapshot.get(reference_id)
    ref_vec = reference_vector(reference, names, snapshot.schema)

    candidates: List[PlayerAttributes] = []
    rows: List[List[float]] = []
    for player in snapshot:
        if player.id == reference.id:
            continue
        values = [player.value(name) for name in names]
        ## Partial data disqualifies the candidate.
        if any(v is None for v in values):
            continue
        candidates.append(player)
        rows.append(values)

    if not candidates:
        return []

    matrix = np.asarray(rows, dtype=float)
    distances = np.sqrt(np.sum(w * (matrix - ref_vec) ** 2, axis=1))

    order = sorted(
        range(len(candidates)),
        key=lambda i: (distances[i], candidates[i].id),
    )
    return [
        SimilarityResult(player=candidates[i], distance=float(distances[i]))
        for i in order[:limit]
    ]
