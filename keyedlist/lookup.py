# Read-only access to the content of a keyed list. Missing ids and positions
# out of range are not errors: the functions return None.

import numpy as np

from .elements import copy_element


def _valid_index(kl, index) -> bool:
    # bool is a subclass of int, but not a position
    if isinstance(index, (bool, np.bool_)):
        return False
    if not isinstance(index, (int, np.integer)):
        return False
    return 0 <= index < len(kl.order)


def get_by_id(kl, id_):
    """Returns a copy of the element with the given id, or None."""
    if id_ not in kl:
        return None
    return kl[id_]


def get_by_ids(kl, ids):
    """Returns copies of the elements with the given ids, in the order of
    `ids`. Ids that are not in the list are skipped.

    Args:
        kl (KeyedList): the list.
        ids (iterable): ids to look for.

    Returns:
        list: the elements found.
    """
    return [kl[id_] for id_ in ids if id_ in kl]


def get_ids(kl):
    """Returns a new list with the ids, in list order."""
    return kl.keys()


def get_id_by_index(kl, index):
    """Returns the id at position `index`, or None if the position is
    negative, out of range, or not an integer."""
    if not _valid_index(kl, index):
        return None
    return kl.order[int(index)]


def get_by_index(kl, index):
    """Returns a copy of the element at position `index`, or None (same
    bounds rule as `get_id_by_index`)."""
    id_ = get_id_by_index(kl, index)
    if id_ is None:
        return None
    return kl[id_]


def get_first(kl):
    """Returns a copy of the first element, or None for an empty list"""
    return get_by_index(kl, 0)


def get_last(kl):
    """Returns a copy of the last element, or None for an empty list"""
    return get_by_index(kl, get_count(kl) - 1)


def get_count(kl) -> int:
    return len(kl.order)
