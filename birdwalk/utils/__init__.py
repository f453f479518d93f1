"""
Utilities Module.

This module provides helper functions for graph analysis.

Components:
    graph_utils: Degree distributions and bipartite graph statistics
"""

from .graph_utils import (
    compute_degree_distribution,
    compute_graph_statistics
)

__all__ = [
    'compute_degree_distribution',
    'compute_graph_statistics',
]
