"""
Sampling Module.

Weighted discrete sampling used by the graph walker. Every probabilistic
choice of a walk, from seed selection to picking the next item in a
user's collection, goes through an AliasSampler.

Classes:
    AliasSampler: O(1) weighted draws with replacement (alias method)

Example:
    >>> import numpy as np
    >>> from birdwalk.sampling import AliasSampler
    >>>
    >>> sampler = AliasSampler([0.5, 0.25, 0.25])
    >>> sampler.sample(5, np.random.default_rng(0))
"""

from .alias import AliasSampler

__all__ = [
    'AliasSampler',
]
