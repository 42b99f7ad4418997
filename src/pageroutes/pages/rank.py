"""Specificity ranking of sibling routes.

The client router takes the first route that matches, so more specific
patterns must come first.  Each path segment scores 4, plus:

- static segment (``a``): +3
- dynamic segment (``:id``): +2
- root segment (empty): +1
- catch-all segment (``:pathMatch(.*)``): -1

Siblings are sorted by descending score at every depth.  Python's sort
is stable, so ties keep their discovery order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from pageroutes.pages.conventions import CATCH_ALL
from pageroutes.pages.types import RouteNode

SEGMENT_BASE = 4
STATIC_BONUS = 3
DYNAMIC_BONUS = 2
ROOT_BONUS = 1
CATCH_ALL_PENALTY = -1


def rank_score(path: str) -> int:
    """Score a route path; higher is more specific.

    ``rank_score("/a") == 7``, ``rank_score("/:id") == 6``,
    ``rank_score("/") == 5``, ``rank_score("/:pathMatch(.*)") == 3``.
    """
    segments = path.split("/")
    if segments[0] == "":
        segments = segments[1:]

    score = 0
    for segment in segments:
        score += SEGMENT_BASE
        if CATCH_ALL in segment:
            score += CATCH_ALL_PENALTY
        elif ":" in segment:
            score += DYNAMIC_BONUS
        elif segment == "":
            score += ROOT_BONUS
        else:
            score += STATIC_BONUS
    return score


def rank_routes(routes: Sequence[RouteNode]) -> list[RouteNode]:
    """Score every node and sort each sibling level, children first.

    Returns new nodes with ``rank`` set; *routes* is left untouched.
    """
    ranked = [
        replace(
            node,
            children=tuple(rank_routes(node.children)),
            rank=rank_score(node.path),
        )
        for node in routes
    ]
    ranked.sort(key=lambda node: node.rank, reverse=True)
    return ranked
