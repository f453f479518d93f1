"""
Graph Walker Module.

This module implements the recommendation engine: random walks on the
bipartite user-item interaction graph.

Key Concept:
    A walk alternates between the two sides of the graph. From an item we
    pick, uniformly, one of the users who interacted with it (the
    referrer); from the referrer we pick one item of their collection,
    biased by the items' global weights. Items that keep showing up at the
    end of such hops are the ones related to the query.
"""

import logging
import threading
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import (
    EmptyQueryError,
    IndexOutOfRangeError,
    InvalidWeightError,
    NoValidSeedsError,
    OrphanItemError,
    SamplerInitError,
)
from ..sampling import AliasSampler
from ..utils.graph_utils import compute_graph_statistics
from .adjacency import (
    UsersToItems,
    as_index,
    invert_adjacency,
    normalize_users_to_items,
    validate_inputs,
)
from .types import QueryItem, WalkerConfig

logger = logging.getLogger(__name__)

Query = Sequence[Union[QueryItem, Tuple[int, float]]]


class GraphWalker:
    """
    Recommendation engine performing random walks on the user-item graph.

    The walker is built once from the global item weights and the
    users-to-items adjacency table. Construction is the expensive part:
    it inverts the adjacency table and builds one alias sampler per user.
    The graph and the samplers never change afterwards, so a walker can
    answer any number of queries.

    Randomness:
        Every draw consumes a ``numpy.random.Generator`` passed down
        explicitly. ``process`` uses the generator given by the caller
        when there is one; otherwise it uses the walker's own generator
        and holds a lock for the duration of the call, so that concurrent
        calls are serialized.

    Example:
        >>> from birdwalk import GraphWalker, WalkerConfig, QueryItem
        >>>
        >>> walker = GraphWalker(
        ...     WalkerConfig(depth=2, draws=100, seed=42),
        ...     item_weights=[1.0, 1.0, 1.0, 1.0],
        ...     users_to_items=[[0, 1], [1, 2], [2, 3]]
        ... )
        >>> items, referrers = walker.process([QueryItem(item=0, weight=1.0)])
        >>> print(len(items))  # 200
    """

    def __init__(
        self,
        config: WalkerConfig,
        item_weights: Sequence[float],
        users_to_items: UsersToItems,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the walker.

        Args:
            config: Walker configuration
            item_weights: Global weight of each item (popularity prior)
            users_to_items: Item collection of each user, as a sequence
                indexed by user or a mapping with dense user keys
            rng: Generator owned by the walker. If None, one is created
                from ``config.seed``

        Raises:
            InvalidConfigError: If depth or draws is below 1
            EmptyInputError: If either table is empty
            IndexOutOfRangeError: If a user references an unknown item
            SamplerInitError: If a user's item sampler cannot be built
        """
        config.validate()

        users = normalize_users_to_items(users_to_items)
        validate_inputs(item_weights, users)

        self._config = config
        self._item_weights = np.array(item_weights, dtype=np.float64)
        self._item_weights.flags.writeable = False

        self._users_to_items = tuple(tuple(user_items) for user_items in users)
        self._items_to_users = tuple(
            tuple(item_users)
            for item_users in invert_adjacency(len(self._item_weights), self._users_to_items)
        )
        self._user_samplers = self._init_user_samplers()

        self._rng = rng if rng is not None else np.random.default_rng(config.seed)
        self._lock = threading.Lock()

        logger.debug(
            "walker ready: %d users, %d items, depth=%d, draws=%d, chained=%s",
            self.num_users, self.num_items, config.depth, config.draws, config.chained
        )

    def _init_user_samplers(self) -> Tuple[Optional[AliasSampler], ...]:
        """
        Build the samplers used to draw items from each user's collection.

        Sampler position j maps to the j-th item of the user's collection.
        Users with an empty collection get no sampler: they never appear in
        the items-to-users lists and can't be chosen as referrers.
        """
        samplers: List[Optional[AliasSampler]] = []

        for user, user_items in enumerate(self._users_to_items):
            if not user_items:
                samplers.append(None)
                continue

            weights = self._item_weights[list(user_items)]
            try:
                samplers.append(AliasSampler(weights))
            except InvalidWeightError as e:
                raise SamplerInitError(
                    user,
                    f"could not initialize the probability and alias tables of user {user}: {e}"
                ) from e

        return tuple(samplers)

    @property
    def config(self) -> WalkerConfig:
        return self._config

    @property
    def num_users(self) -> int:
        return len(self._users_to_items)

    @property
    def num_items(self) -> int:
        return len(self._item_weights)

    @property
    def item_weights(self) -> np.ndarray:
        return self._item_weights

    @property
    def users_to_items(self) -> Tuple[Tuple[int, ...], ...]:
        return self._users_to_items

    @property
    def items_to_users(self) -> Tuple[Tuple[int, ...], ...]:
        return self._items_to_users

    def process(
        self,
        query: Query,
        rng: Optional[np.random.Generator] = None
    ) -> Tuple[List[int], List[int]]:
        """
        Sample seed items from the query and walk from them.

        Args:
            query: QueryItem entries, or (item, weight) pairs
            rng: Generator for this call. If None, the walker's own
                generator is used under the walker's lock

        Returns:
            Tuple of (items, referrers): the items visited at every hop
            and the users who referred them, hop after hop

        Raises:
            EmptyQueryError: If the query is empty
            IndexOutOfRangeError: If the query references an unknown item
            InvalidWeightError: If the query weights can't be sampled from
            NoValidSeedsError: If no sampled seed has interaction history
            OrphanItemError: If a walk reaches an item without users
        """
        if rng is not None:
            return self._process(query, rng)

        with self._lock:
            return self._process(query, self._rng)

    def _process(self, query: Query, rng: np.random.Generator) -> Tuple[List[int], List[int]]:
        seeds = self.sample_seeds(query, rng)

        items: List[int] = []
        referrers: List[int] = []
        step_items = seeds
        for _ in range(self._config.depth):
            next_items, step_referrers = self.step(step_items, rng)
            items.extend(next_items)
            referrers.extend(step_referrers)

            if self._config.chained:
                step_items = next_items

        return items, referrers

    def sample_seeds(self, query: Query, rng: np.random.Generator) -> List[int]:
        """
        Draw the starting points of the walks from the query.

        Each query entry is weighted by its query weight times the item's
        global weight. Draws landing on an item nobody interacted with are
        dropped, so fewer than ``draws`` seeds may be returned.

        Args:
            query: QueryItem entries, or (item, weight) pairs
            rng: Generator consumed by the draws

        Returns:
            List of seed items
        """
        entries = self._parse_query(query)

        items = [entry.item for entry in entries]
        query_weights = np.array([entry.weight for entry in entries], dtype=np.float64)
        weights = _rescaled(query_weights) * _rescaled(self._item_weights[items])
        sampler = AliasSampler(weights)

        seeds = []
        excluded = 0
        for position in sampler.sample(self._config.draws, rng):
            item = items[position]
            if not self._items_to_users[item]:
                excluded += 1
                continue
            seeds.append(item)

        if excluded:
            logger.debug("excluded %d of %d seeds without interaction history",
                         excluded, self._config.draws)

        if not seeds:
            raise NoValidSeedsError(
                "no items were sampled, check that the query refers to "
                "items that users have interacted with"
            )

        return seeds

    def _parse_query(self, query: Query) -> List[QueryItem]:
        if len(query) == 0:
            raise EmptyQueryError("empty query")

        entries = []
        for entry in query:
            if not isinstance(entry, QueryItem):
                entry = QueryItem(*entry)
            item = as_index(entry.item)
            if not 0 <= item < self.num_items:
                raise IndexOutOfRangeError(
                    f"query references item {item} but only "
                    f"{self.num_items} items are known"
                )
            if not np.isfinite(entry.weight) or entry.weight < 0:
                raise InvalidWeightError(
                    f"query weight of item {item} must be finite and "
                    f"non-negative, got {entry.weight}"
                )
            entries.append(QueryItem(item=item, weight=float(entry.weight)))

        return entries

    def step(self, items: Iterable[int], rng: np.random.Generator) -> Tuple[List[int], List[int]]:
        """
        Perform one random walk step for each incoming item.

        Args:
            items: Current items of the walks
            rng: Generator consumed by the draws

        Returns:
            Tuple of (next_items, referrers), parallel to the input: the
            visited items and the users visited to reach them
        """
        referrers = []
        for item in items:
            related_users = self._items_to_users[item]
            if not related_users:
                raise OrphanItemError(item)
            referrers.append(related_users[int(rng.integers(len(related_users)))])

        next_items = [self._sample_item(user, rng) for user in referrers]

        return next_items, referrers

    def _sample_item(self, user: int, rng: np.random.Generator) -> int:
        """Sample one item from a user's collection."""
        sampler = self._user_samplers[user]
        return self._users_to_items[user][sampler.sample_one(rng)]

    def recommend(
        self,
        query: Query,
        n: int = 10,
        exclude_query: bool = False,
        rng: Optional[np.random.Generator] = None
    ) -> List[Tuple[int, int]]:
        """
        Rank items by how often the walks visited them.

        Args:
            query: QueryItem entries, or (item, weight) pairs
            n: Maximum number of recommendations
            exclude_query: Whether to drop the query's own items
            rng: Generator for this call (see ``process``)

        Returns:
            List of (item, visit_count), most visited first, ties broken
            by ascending item index
        """
        items, _ = self.process(query, rng)
        counts = Counter(items)

        if exclude_query:
            for entry in self._parse_query(query):
                counts.pop(entry.item, None)

        ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[:n]

    def get_statistics(self) -> Dict:
        """
        Get statistics about the interaction graph and the walk settings.

        Returns:
            Dictionary with graph walking statistics
        """
        stats = compute_graph_statistics(self._users_to_items, self._items_to_users)
        stats.update({
            'depth': self._config.depth,
            'draws': self._config.draws,
            'chained': self._config.chained,
            'expected_walk_steps': self._config.depth * self._config.draws,
        })
        return stats

    def __repr__(self) -> str:
        return (
            f"GraphWalker(num_users={self.num_users}, num_items={self.num_items}, "
            f"depth={self._config.depth}, draws={self._config.draws})"
        )


def _rescaled(values: np.ndarray) -> np.ndarray:
    """
    Divide values by their largest magnitude.

    Products of two rescaled vectors stay within [-1, 1] and can't
    overflow. Non-finite or all-zero vectors are returned unchanged so
    that the sampler rejects them.
    """
    scale = np.abs(values).max()
    if scale == 0 or not np.isfinite(scale):
        return values
    return values / scale
