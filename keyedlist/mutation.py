# Copy-on-write operations. Each function returns a new KeyedList and leaves
# its argument untouched. The internal dictionary of the argument is copied
# (elements are shared between the two lists, which is safe since stored
# elements are never modified nor handed out).

from .elements import get_id, copy_element, merge
from .errors import DuplicateKeyError
from .keyed_list import KeyedList
from .logger import logger


def _add(kl, element, at_front):
    id_ = get_id(element)
    if id_ in kl:
        logger.debug("rejecting duplicated id %r", id_)
        raise DuplicateKeyError(id_)
    elements = dict(kl._elements)
    elements[id_] = copy_element(element)
    if at_front:
        order = (id_,) + kl.order
    else:
        order = kl.order + (id_,)
    return KeyedList._build(order, elements)


def append(kl, element):
    """Returns a new list with a copy of `element` added at the end.

    Raises:
        DuplicateKeyError: if the id of the element is already in the list.
    """
    return _add(kl, element, at_front=False)


def insert(kl, element):
    """Returns a new list with a copy of `element` added at the beginning.

    Raises:
        DuplicateKeyError: if the id of the element is already in the list.
    """
    return _add(kl, element, at_front=True)


def update(kl, patch):
    """Returns a new list in which the element with id `patch.id` is replaced
    by the merge of its fields with the fields of `patch` (patch fields win).
    The position of the element does not change.

    If the id is not in the list the patch is ignored and `kl` itself is
    returned: `update` never adds elements.

    Args:
        kl (KeyedList): the list.
        patch: mapping or object with an `id` and a subset of the fields.

    Returns:
        KeyedList: the updated list.
    """
    id_ = get_id(patch)
    if id_ not in kl:
        logger.debug("update: id %r not in list, patch ignored", id_)
        return kl
    elements = dict(kl._elements)
    elements[id_] = merge(kl._elements[id_], patch)
    return KeyedList._build(kl.order, elements)


def remove_by_id(kl, id_):
    """Returns a new list without the element with the given id. If the id is
    not in the list, `kl` itself is returned."""
    if id_ not in kl:
        logger.debug("remove_by_id: id %r not in list", id_)
        return kl
    elements = dict(kl._elements)
    del elements[id_]
    order = [k for k in kl.order if k != id_]
    return KeyedList._build(order, elements)


def remove(kl, element):
    """Same as `remove_by_id(kl, element.id)`"""
    return remove_by_id(kl, get_id(element))
