"""
birdwalk: random walk recommendations on user-item interaction graphs.

Modules:
    sampling: Alias method weighted sampler
    walks: Graph walker, configuration and query types
    data: Interaction table loading and synthetic graphs
    utils: Graph statistics
    errors: Exception hierarchy
"""

from .errors import (
    BirdwalkError,
    InvalidConfigError,
    EmptyInputError,
    EmptyQueryError,
    EmptyDistributionError,
    InvalidWeightError,
    IndexOutOfRangeError,
    SamplerInitError,
    NoValidSeedsError,
    OrphanItemError,
)
from .sampling import AliasSampler
from .walks import GraphWalker, WalkerConfig, QueryItem

__version__ = "1.0.0"

__all__ = [
    'AliasSampler',
    'GraphWalker',
    'WalkerConfig',
    'QueryItem',
    'BirdwalkError',
    'InvalidConfigError',
    'EmptyInputError',
    'EmptyQueryError',
    'EmptyDistributionError',
    'InvalidWeightError',
    'IndexOutOfRangeError',
    'SamplerInitError',
    'NoValidSeedsError',
    'OrphanItemError',
]
