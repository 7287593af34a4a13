"""
Project: RosterWeb
File Name: network/builder.py
Description:
    Builds a PlayerGraph from a list of PlayerSeason records.

    Algorithm:
    1. Group records by (team, season) into rosters, keeping every record.
    2. Resolve each roster entry to a node index, creating nodes by name.
    3. Deduplicate the roster by node index so a repeated name never pairs
       with itself.
    4. For every unordered pair in the roster: new edge with weight 1, or
       increment the existing edge.
    5. Assemble and return the read-only PlayerGraph.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from rosterweb.core.models import PlayerSeason
from rosterweb.network.models import PlayerGraph, PlayerNode, TeammateEdge

logger = logging.getLogger(__name__)


def build_player_graph(records: Iterable[PlayerSeason]) -> PlayerGraph:
    """Build the teammate network from player-season records.

    Args:
        records: Player-season rows.  Identifiers are assumed non-empty;
            the loader filters blank rows.

    Returns:
        PlayerGraph where edge weight = number of shared (team, season)
        rosters.  Empty input gives an empty graph.
    """
    # ------------------------------------------------------------------ #
    # Step 1: Group into rosters (dicts keep first-seen group order)      #
    # ------------------------------------------------------------------ #
    rosters: dict[tuple[str, str], list[str]] = defaultdict(list)
    for record in records:
        rosters[record.group_key].append(record.player_name)

    if not rosters:
        return PlayerGraph.empty()

    name_index: dict[str, int] = {}
    names: list[str] = []

    def _resolve(name: str) -> int:
        idx = name_index.get(name)
        if idx is None:
            idx = len(names)
            name_index[name] = idx
            names.append(name)
        return idx

    # (u, v) with u < v → position in edge arena
    edge_lookup: dict[tuple[int, int], int] = {}
    edge_pairs: list[tuple[int, int]] = []
    edge_weights: list[int] = []

    for roster in rosters.values():
        # -------------------------------------------------------------- #
        # Steps 2–3: Resolve names, drop repeated identities              #
        # -------------------------------------------------------------- #
        members = list(dict.fromkeys(_resolve(name) for name in roster))

        # -------------------------------------------------------------- #
        # Step 4: Pair every two distinct members                         #
        # -------------------------------------------------------------- #
        for i, a in enumerate(members):
            for b in members[i + 1:]:
                if a == b:
                    continue
                key = (a, b) if a < b else (b, a)
                pos = edge_lookup.get(key)
                if pos is None:
                    edge_lookup[key] = len(edge_pairs)
                    edge_pairs.append(key)
                    edge_weights.append(1)
                else:
                    edge_weights[pos] += 1

    # ------------------------------------------------------------------ #
    # Step 5: Assemble the arena                                          #
    # ------------------------------------------------------------------ #
    incident: list[list[int]] = [[] for _ in names]
    edges: list[TeammateEdge] = []
    for pos, ((u, v), weight) in enumerate(zip(edge_pairs, edge_weights)):
        edges.append(TeammateEdge(u=u, v=v, weight=weight))
        incident[u].append(pos)
        incident[v].append(pos)

    logger.info(
        "Built teammate graph: %d players, %d edges from %d rosters",
        len(names), len(edges), len(rosters),
    )

    return PlayerGraph(
        nodes=tuple(PlayerNode(index=i, name=name) for i, name in enumerate(names)),
        edges=tuple(edges),
        name_index=dict(name_index),
        incident=tuple(tuple(ids) for ids in incident),
    )
