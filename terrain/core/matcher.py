"""
Wang Terrain Tools - Tile Matcher

Finds tiles whose labels satisfy a target WangID and picks among them using
the tiles' probabilities.
"""

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from .candidates import CandidateIndex
from .tileset import Tile
from .transform import FlipFlags, transform_wang_id
from .wang_id import WangId, compared_indexes

# Only untransformed tiles are used until tilesets can declare which
# flips/rotations are allowed for terrain painting.
ALLOWED_TRANSFORMS: tuple[FlipFlags, ...] = (FlipFlags.NONE,)


@dataclass(frozen=True)
class TileMatch:
    tile: Tile
    flags: FlipFlags = FlipFlags.NONE


def match_tiles(
    target: WangId,
    index: CandidateIndex,
    indexes: Iterable[int] | None = None,
    transforms: Sequence[int] = ALLOWED_TRANSFORMS,
) -> list[TileMatch]:
    """
    Find every (tile, flags) pair whose labels equal target on the compared slots.

    Args:
        target: Desired WangID
        index: Candidate tiles and their effective matching type
        indexes: Subset of the type's slots to compare; slots left out are
                 "don't care". Defaults to all slots of the effective type.
        transforms: Flip flags to try on each candidate

    Returns:
        Matching tiles in candidate order. Empty when nothing fits, which
        callers treat as "leave this cell unpainted".
    """
    slots = compared_indexes(index.effective_type)
    if indexes is not None:
        wanted = set(indexes)
        slots = tuple(i for i in slots if i in wanted)

    results = []
    for candidate in index.candidates:
        for flags in transforms:
            labels = transform_wang_id(candidate.wang_id, flags)
            if all(labels[i] == target[i] for i in slots):
                results.append(TileMatch(candidate.tile, FlipFlags(flags)))
    return results


def random_from(matches: Sequence[TileMatch], rng: random.Random | None = None) -> TileMatch:
    """
    Pick a match at random, weighted by tile probability.

    Tiles with probability 0 are never picked unless every tile has
    probability 0, in which case the pick is uniform over all matches.

    Raises:
        ValueError: If matches is empty (callers must check first)
    """
    if not matches:
        raise ValueError("random_from() requires at least one match")
    rng = rng or random

    total = 0.0
    cumulative = []
    for match in matches:
        if match.tile.probability > 0:
            total += match.tile.probability
            cumulative.append((total, match))

    roll = rng.random() * total
    for running_sum, match in cumulative:
        if roll < running_sum:
            return match

    return matches[rng.randrange(len(matches))]
