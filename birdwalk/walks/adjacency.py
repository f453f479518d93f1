"""
Adjacency Module.

Validation of the walker inputs and construction of the items-to-users
adjacency list from the users-to-items one. We sacrifice memory for speed
by keeping both complementary adjacency lists.
"""

from numbers import Integral
from typing import Any, List, Mapping, Sequence, Union

from ..errors import EmptyInputError, IndexOutOfRangeError

UsersToItems = Union[Sequence[Sequence[int]], Mapping[int, Sequence[int]]]


def as_index(value: Any, kind: str = "item") -> int:
    """
    Return value as a plain int, refusing anything that is not integral.

    Floats are refused even when they hold a whole number, so that 1.7
    never silently becomes index 1. Booleans are refused as well.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise IndexOutOfRangeError(
            f"{kind} indices must be integers, got {value!r}"
        )
    return int(value)


def normalize_users_to_items(users_to_items: UsersToItems) -> List[List[int]]:
    """
    Turn the users-to-items table into a list indexed by user.

    A mapping is accepted as long as its keys are exactly 0..n-1; the
    insertion order of the mapping does not matter.

    Args:
        users_to_items: Sequence indexed by user, or mapping user -> items

    Returns:
        List of item lists, one per user in ascending user order
    """
    if isinstance(users_to_items, Mapping):
        num_users = len(users_to_items)
        for user in users_to_items:
            if not 0 <= as_index(user, "user") < num_users:
                raise IndexOutOfRangeError(
                    f"user indices must be dense in [0, {num_users}), got {user}"
                )
        return [[as_index(item) for item in users_to_items[user]] for user in range(num_users)]

    return [[as_index(item) for item in user_items] for user_items in users_to_items]


def validate_inputs(item_weights: Sequence[float], users_to_items: List[List[int]]) -> None:
    """
    Check the validity of the data fed to the walker.

    Raises an error when a discrepancy could make the walk crash: empty
    tables, or an item referenced by a user without a matching weight.
    """
    if len(item_weights) == 0:
        raise EmptyInputError("empty sequence of item weights")
    if len(users_to_items) == 0:
        raise EmptyInputError("empty users to items adjacency table")

    num_items = len(item_weights)
    for user, user_items in enumerate(users_to_items):
        for item in user_items:
            if not 0 <= item < num_items:
                raise IndexOutOfRangeError(
                    f"user {user} references item {item} but only "
                    f"{num_items} item weights were given"
                )


def invert_adjacency(num_items: int, users_to_items: Sequence[Sequence[int]]) -> List[List[int]]:
    """
    Transform the users-to-items adjacency list into items-to-users.

    Users appear in ascending order in each item's list, once per
    occurrence of the item in their collection.

    Args:
        num_items: Total number of items
        users_to_items: Item lists indexed by user

    Returns:
        User lists indexed by item (empty for items nobody interacted with)
    """
    items_to_users: List[List[int]] = [[] for _ in range(num_items)]

    for user, user_items in enumerate(users_to_items):
        for item in user_items:
            items_to_users[item].append(user)

    return items_to_users
