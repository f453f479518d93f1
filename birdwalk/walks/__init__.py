"""
Random Walk Module for Recommendations.

This module implements random walks on the bipartite user-item
interaction graph. It includes:

1. Validation of the interaction tables and adjacency inversion
2. Query-seeded, multi-hop walks alternating items and users
3. Ranking of visited items

The core idea: items reached by walking through users who share items
with the query are the items most related to it.

Classes:
    GraphWalker: Owns the graph and answers queries
    WalkerConfig: Depth and number of draws of the walks
    QueryItem: One weighted item of a query

Example:
    >>> from birdwalk.walks import GraphWalker, WalkerConfig, QueryItem
    >>>
    >>> walker = GraphWalker(WalkerConfig(depth=1, draws=5), [1, 1, 1, 1],
    ...                      [[0, 1], [1, 2], [2, 3]])
    >>> items, referrers = walker.process([QueryItem(0, 1.0)])
"""

from .types import QueryItem, WalkerConfig
from .walker import GraphWalker
from .adjacency import invert_adjacency

__all__ = [
    'GraphWalker',
    'WalkerConfig',
    'QueryItem',
    'invert_adjacency',
]
