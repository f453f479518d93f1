"""
Alias Sampler Module.

This module implements Walker's alias method for drawing indices from a
fixed discrete distribution. After O(n) preprocessing each draw costs O(1):
one uniform bucket choice and one biased coin flip.

Key Concept:
    Every bucket holds at most two outcomes: its own index, kept with
    probability ``prob_table[bucket]``, and an alias index that receives
    the rest of the bucket's mass. Building the tables amounts to pouring
    the mass of overfull outcomes into the spare room of underfull ones.
"""

import logging
from typing import Sequence

import numpy as np

from ..errors import EmptyDistributionError, InvalidWeightError

logger = logging.getLogger(__name__)


class AliasSampler:
    """
    Weighted sampling with replacement using the alias method.

    The sampler is immutable once built. It does not own a random source:
    every draw takes a ``numpy.random.Generator`` so that the caller
    decides how randomness is shared between samplers.

    Example:
        >>> import numpy as np
        >>> from birdwalk.sampling import AliasSampler
        >>>
        >>> sampler = AliasSampler([1.0, 2.0, 7.0])
        >>> rng = np.random.default_rng(42)
        >>> draws = sampler.sample(1000, rng)
        >>> print(draws.shape)  # (1000,)
    """

    def __init__(self, weights: Sequence[float]):
        """
        Build the probability and alias tables.

        Args:
            weights: Non-negative, finite weights, one per outcome

        Raises:
            EmptyDistributionError: If weights is empty
            InvalidWeightError: If a weight is negative or non-finite,
                or if the weights sum to zero
        """
        weights = np.asarray(weights, dtype=np.float64).ravel()

        if weights.size == 0:
            raise EmptyDistributionError("cannot sample from an empty distribution")
        if not np.all(np.isfinite(weights)):
            raise InvalidWeightError("weights must be finite")
        if np.any(weights < 0):
            raise InvalidWeightError("weights must be non-negative")

        largest = weights.max()
        if largest == 0:
            raise InvalidWeightError("weights must not sum to zero")

        # Rescale so that the sum of large finite weights can't overflow
        weights = weights / largest

        self.num_outcomes = weights.size
        self._probs = weights / weights.sum()
        self._probs.flags.writeable = False

        self._setup_alias_table()

    def _setup_alias_table(self) -> None:
        """
        Setup alias table for O(1) sampling.

        Outcomes whose scaled probability is below 1 are underfull, the
        others overfull. Each underfull outcome is paired with an overfull
        one which donates the missing mass and shrinks accordingly.
        """
        n = self.num_outcomes
        scaled = self._probs * n

        self.alias = np.zeros(n, dtype=np.int64)
        self.prob_table = np.zeros(n, dtype=np.float64)

        smaller = []
        larger = []

        for i, p in enumerate(scaled):
            if p < 1.0:
                smaller.append(i)
            else:
                larger.append(i)

        while smaller and larger:
            small_idx = smaller.pop()
            large_idx = larger.pop()

            self.prob_table[small_idx] = scaled[small_idx]
            self.alias[small_idx] = large_idx

            scaled[large_idx] = scaled[large_idx] + scaled[small_idx] - 1.0

            if scaled[large_idx] < 1.0:
                smaller.append(large_idx)
            else:
                larger.append(large_idx)

        # Leftovers only differ from 1 by rounding error
        while larger:
            large_idx = larger.pop()
            self.prob_table[large_idx] = 1.0
            self.alias[large_idx] = large_idx

        while smaller:
            small_idx = smaller.pop()
            self.prob_table[small_idx] = 1.0
            self.alias[small_idx] = small_idx

        self.alias.flags.writeable = False
        self.prob_table.flags.writeable = False

        logger.debug("built alias tables for %d outcomes", n)

    @property
    def probabilities(self) -> np.ndarray:
        """Normalized input weights (read-only)."""
        return self._probs

    def __len__(self) -> int:
        return self.num_outcomes

    def sample(self, num_samples: int, rng: np.random.Generator) -> np.ndarray:
        """
        Draw indices independently, with replacement.

        Args:
            num_samples: Number of draws (at least 1)
            rng: Random generator consumed by the draws

        Returns:
            Array of shape [num_samples] with indices in [0, n)
        """
        if num_samples < 1:
            raise ValueError(f"num_samples must be >= 1, got {num_samples}")

        # First, sample which bin
        idx = rng.integers(0, self.num_outcomes, size=num_samples)

        # Then, decide whether to use original or alias
        u = rng.random(num_samples)
        use_alias = u >= self.prob_table[idx]

        return np.where(use_alias, self.alias[idx], idx)

    def sample_one(self, rng: np.random.Generator) -> int:
        """Draw a single index."""
        return int(self.sample(1, rng)[0])

    def __repr__(self) -> str:
        return f"AliasSampler(num_outcomes={self.num_outcomes})"
