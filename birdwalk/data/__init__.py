"""
Data Module.

This module handles:
1. Loading the item weights and users-to-items tables from JSON
2. Creating synthetic interaction graphs

Classes:
    InteractionData: Container of the walker's input tables

Example:
    >>> from birdwalk.data import create_mock_interactions
    >>>
    >>> data = create_mock_interactions(num_users=50, num_items=20, seed=0)
    >>> data.num_users  # 50
"""

from .loader import (
    InteractionData,
    load_interactions,
    create_mock_interactions,
    interactions_from_config
)

__all__ = [
    'InteractionData',
    'load_interactions',
    'create_mock_interactions',
    'interactions_from_config',
]
