"""
Errors Module.

Every failure raised by the sampler and the walker derives from
BirdwalkError, so callers can catch the whole family at once. The
value-related errors also derive from the matching builtin
(ValueError, IndexError) to keep the usual idioms working.
"""

from typing import Optional


class BirdwalkError(Exception):
    """Base class for all birdwalk errors."""


class InvalidConfigError(BirdwalkError, ValueError):
    """Depth or draws below 1."""


class EmptyInputError(BirdwalkError, ValueError):
    """Item weights or user adjacency table is empty."""


class EmptyQueryError(BirdwalkError, ValueError):
    """A query with no items was passed to the walker."""


class EmptyDistributionError(BirdwalkError, ValueError):
    """A sampler was built from an empty weight vector."""


class InvalidWeightError(BirdwalkError, ValueError):
    """A weight is negative or non-finite, or all weights are zero."""


class IndexOutOfRangeError(BirdwalkError, IndexError):
    """An item (or user) index falls outside the known range."""


class SamplerInitError(BirdwalkError):
    """
    A user's item sampler could not be built.

    The originating InvalidWeightError is chained as ``__cause__``.

    Attributes:
        user: Index of the user whose collection was rejected
    """

    def __init__(self, user: int, message: Optional[str] = None):
        self.user = user
        super().__init__(
            message or f"cannot initialize the item sampler of user {user}"
        )


class NoValidSeedsError(BirdwalkError):
    """Every seed drawn from the query has no interaction history."""


class OrphanItemError(BirdwalkError):
    """
    A walk reached an item that no user has interacted with.

    Attributes:
        item: Index of the orphan item
    """

    def __init__(self, item: int):
        self.item = item
        super().__init__(
            f"cannot perform step: no one has interacted with item {item}"
        )


__all__ = [
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
