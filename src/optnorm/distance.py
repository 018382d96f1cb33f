# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Edit-distance helpers used to suggest likely intended names."""

from __future__ import annotations

from collections.abc import Iterable

from rapidfuzz.distance import Levenshtein

from .types import DEFAULT_SUGGESTION_DISTANCE, DistanceFunction


def levenshtein(left: str, right: str) -> int:
    """Return the Levenshtein edit distance between ``left`` and ``right``."""

    return int(Levenshtein.distance(left, right))


def closest_match(
    value: str,
    candidates: Iterable[str],
    *,
    distance: DistanceFunction = levenshtein,
    limit: int = DEFAULT_SUGGESTION_DISTANCE,
) -> str | None:
    """Return the first candidate whose distance to ``value`` is below ``limit``.

    Candidates are scanned in the order given; callers sort them when the
    suggestion has to be stable.

    Args:
        value: Unrecognised name typed by the user.
        candidates: Known names to compare against.
        distance: Function measuring dissimilarity between two strings.
        limit: Exclusive upper bound on the accepted distance.

    Returns:
        str | None: Matching candidate, or ``None`` when nothing is close enough.
    """

    for candidate in candidates:
        if distance(candidate, value) < limit:
            return candidate
    return None


__all__ = ["closest_match", "levenshtein"]
