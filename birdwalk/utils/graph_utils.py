"""
Graph Utilities Module.

This module provides helper functions for analysing the bipartite
user-item interaction graph.
"""

from collections import Counter
from typing import Dict, Sequence

import numpy as np


def compute_degree_distribution(adjacency: Sequence[Sequence[int]]) -> Dict:
    """
    Compute degree distribution statistics of one side of the graph.

    Args:
        adjacency: Neighbor lists indexed by node (users_to_items gives user
            degrees, items_to_users gives item degrees)

    Returns:
        Dictionary with degree statistics
    """
    degrees = np.array([len(neighbors) for neighbors in adjacency], dtype=np.int64)

    if degrees.size == 0:
        return {
            'degrees': degrees,
            'mean': 0.0,
            'std': 0.0,
            'min': 0,
            'max': 0,
            'histogram': {},
            'isolated_nodes': 0
        }

    degree_counts = Counter(degrees.tolist())
    histogram = {int(k): v for k, v in sorted(degree_counts.items())}

    return {
        'degrees': degrees,
        'mean': float(degrees.mean()),
        'std': float(degrees.std()),
        'min': int(degrees.min()),
        'max': int(degrees.max()),
        'histogram': histogram,
        'isolated_nodes': int((degrees == 0).sum())
    }


def compute_graph_statistics(
    users_to_items: Sequence[Sequence[int]],
    items_to_users: Sequence[Sequence[int]]
) -> Dict:
    """
    Compute statistics of the bipartite interaction graph.

    Args:
        users_to_items: Item lists indexed by user
        items_to_users: User lists indexed by item

    Returns:
        Dictionary with graph statistics
    """
    num_users = len(users_to_items)
    num_items = len(items_to_users)

    user_stats = compute_degree_distribution(users_to_items)
    item_stats = compute_degree_distribution(items_to_users)

    num_edges = int(user_stats['degrees'].sum())
    max_edges = num_users * num_items
    density = num_edges / max_edges if max_edges > 0 else 0

    return {
        'num_users': num_users,
        'num_items': num_items,
        'num_edges': num_edges,
        'density': density,
        'avg_user_degree': user_stats['mean'],
        'max_user_degree': user_stats['max'],
        'avg_item_degree': item_stats['mean'],
        'max_item_degree': item_stats['max'],
        'users_without_items': user_stats['isolated_nodes'],
        'items_without_users': item_stats['isolated_nodes'],
    }
