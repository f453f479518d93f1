"""
Walk Value Types.

Immutable values exchanged with the graph walker: the walker
configuration and the items of a query.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from ..errors import InvalidConfigError


@dataclass(frozen=True)
class WalkerConfig:
    """
    Configuration of a GraphWalker.

    Attributes:
        depth: Number of hops per walk chain
        draws: Number of walk chains seeded per query
        chained: If True each hop starts from the previous hop's items,
            otherwise every hop restarts from the seed items
        seed: Seed of the walker's own random generator (None for entropy)
    """
    depth: int = 1
    draws: int = 1000
    chained: bool = True
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise InvalidConfigError when depth or draws is below 1."""
        if self.depth < 1:
            raise InvalidConfigError(
                f"the depth must be greater than or equal to 1, got {self.depth}"
            )
        if self.draws < 1:
            raise InvalidConfigError(
                f"the number of draws must be greater than or equal to 1, got {self.draws}"
            )

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]]) -> 'WalkerConfig':
        """
        Build a config from the ``walker`` section of a config file.

        Unknown keys are rejected so that typos do not go unnoticed.
        """
        config = dict(config or {})
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise InvalidConfigError(
                f"unknown walker config keys: {', '.join(sorted(unknown))}"
            )
        return cls(**config)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class QueryItem:
    """
    One entry of a query.

    Attributes:
        item: Item index
        weight: Query-specific multiplier of the item's global weight,
            for instance the number of past interactions with the item
    """
    item: int
    weight: float = 1.0
