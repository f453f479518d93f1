"""
Interaction Data Loader Module.

This module provides utilities for loading the walker's input tables from
disk and creating synthetic interaction graphs for testing/development.

The tables themselves are produced upstream from raw interaction logs;
here they are only read back, checked for shape and handed to the walker.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import numpy as np

from ..sampling import AliasSampler


@dataclass
class InteractionData:
    """
    Input tables of a GraphWalker.

    Attributes:
        item_weights: Global weight of each item
        users_to_items: Item collection of each user
    """
    item_weights: List[float] = field(default_factory=list)
    users_to_items: List[List[int]] = field(default_factory=list)

    @property
    def num_users(self) -> int:
        return len(self.users_to_items)

    @property
    def num_items(self) -> int:
        return len(self.item_weights)

    def save(self, path: str) -> None:
        """
        Save tables to JSON file.

        Args:
            path: Output file path
        """
        data = {
            'item_weights': [float(w) for w in self.item_weights],
            'users_to_items': [[int(i) for i in items] for items in self.users_to_items],
        }

        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(data, f)


def load_interactions(path: str) -> InteractionData:
    """
    Load tables from a JSON file.

    The file holds an object with two keys: ``item_weights`` (list of
    numbers) and ``users_to_items`` (list of lists of item indices).

    Args:
        path: Path to JSON file

    Returns:
        InteractionData read from file
    """
    with open(path, 'r') as f:
        data = json.load(f)

    missing = {'item_weights', 'users_to_items'} - set(data)
    if missing:
        raise ValueError(f"{path} is missing keys: {', '.join(sorted(missing))}")

    return InteractionData(
        item_weights=[float(w) for w in data['item_weights']],
        users_to_items=[[int(i) for i in items] for items in data['users_to_items']],
    )


def create_mock_interactions(
    num_users: int = 200,
    num_items: int = 100,
    mean_items_per_user: float = 8.0,
    popularity_exponent: float = 1.0,
    seed: Optional[int] = 42
) -> InteractionData:
    """
    Create a synthetic interaction graph for testing.

    Item popularity follows a power law over item rank, so a few items are
    held by many users and most items by few. Every user holds at least
    one item; collections may contain repeated items. The global weight of
    an item is its number of interactions.

    Args:
        num_users: Number of users
        num_items: Number of items
        mean_items_per_user: Average collection size
        popularity_exponent: Steepness of the popularity power law
        seed: Random seed (None for random)

    Returns:
        InteractionData with synthetic tables
    """
    rng = np.random.default_rng(seed)

    popularity = 1.0 / np.arange(1, num_items + 1) ** popularity_exponent
    rng.shuffle(popularity)
    item_sampler = AliasSampler(popularity)

    sizes = 1 + rng.poisson(max(mean_items_per_user - 1.0, 0.0), size=num_users)

    users_to_items = [
        item_sampler.sample(int(size), rng).tolist()
        for size in sizes
    ]

    counts = np.zeros(num_items, dtype=np.float64)
    for user_items in users_to_items:
        np.add.at(counts, user_items, 1.0)

    return InteractionData(item_weights=counts.tolist(), users_to_items=users_to_items)


def interactions_from_config(data_config: Optional[dict] = None) -> InteractionData:
    """
    Load the tables named by the ``data`` config section, or create them.

    If ``path`` is set the tables are read from that JSON file, otherwise a
    synthetic graph is generated from the remaining keys.

    Args:
        data_config: The ``data`` section of a config file

    Returns:
        InteractionData
    """
    data_config = dict(data_config or {})
    path = data_config.pop('path', None)

    if path:
        return load_interactions(path)

    return create_mock_interactions(**data_config)
