from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .models import ColorMatchResult


@dataclass(frozen=True)
class DistanceBucket:
    label: str
    max_distance: float


# Inclusive upper bounds, checked in order. Coarser than match quality so
# that a picker can group a long list of nearby candidates.
DISTANCE_BUCKETS: tuple[DistanceBucket, ...] = (
    DistanceBucket(label="Exact Match", max_distance=16.0),
    DistanceBucket(label="Very Close", max_distance=32.0),
    DistanceBucket(label="Close", max_distance=48.0),
    DistanceBucket(label="Similar", max_distance=80.0),
    DistanceBucket(label="Approximate", max_distance=math.inf),
)


def get_distance_bucket(distance: float) -> DistanceBucket:
    for bucket in DISTANCE_BUCKETS:
        if distance <= bucket.max_distance:
            return bucket
    return DISTANCE_BUCKETS[-1]


def group_by_bucket(results: Iterable[ColorMatchResult]) -> dict[str, list[ColorMatchResult]]:
    grouped: dict[str, list[ColorMatchResult]] = {}
    for result in results:
        grouped.setdefault(get_distance_bucket(result.distance).label, []).append(result)
    return {
        bucket.label: grouped[bucket.label]
        for bucket in DISTANCE_BUCKETS
        if bucket.label in grouped
    }
