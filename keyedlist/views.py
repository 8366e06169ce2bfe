import functools

from .keyed_list import KeyedList, from_array


def map(kl, mapper):
    """Applies `mapper(element, index, kl)` to a copy of each element, in list
    order, and returns the list of results. The third argument is the
    original list, which can be used to look up sibling elements.

    ```python
    names = map(kl, lambda x, i, xs: f"{i}: {x['name']}")
    ```
    """
    return [mapper(element, i, kl) for i, element in enumerate(kl)]


def map_ids(kl, mapper):
    """Same as `map`, but `mapper(id, index, kl)` receives the ids."""
    return [mapper(id_, i, kl) for i, id_ in enumerate(kl.order)]


def map_to_list(kl, mapper):
    """Same as `map`, but the results are collected into a new keyed list.
    The mapper must return elements with unique ids."""
    return from_array(map(kl, mapper))


def filter(kl, predicate):
    """Returns copies of the elements for which `predicate(element)` is true,
    in list order. The predicate and the result get separate copies."""
    return [kl[id_] for id_, element in kl.items() if predicate(element)]


def sort(kl, comparator):
    """Returns a new list with the same elements, ordered by a three-way
    comparator: `comparator(a, b)` is negative if `a` goes before `b`,
    positive if after, and zero if they are equivalent. The sort is stable.
    """
    pairs = list(kl.items())
    key = functools.cmp_to_key(lambda a, b: comparator(a[1], b[1]))
    order = [id_ for id_, _ in sorted(pairs, key=key)]
    return KeyedList._build(order, dict(kl._elements))


def sort_by(kl, key, reverse=False):
    """Returns a new list with the same elements, ordered by `key(element)`.
    The sort is stable, also when `reverse` is True."""
    pairs = list(kl.items())
    order = [id_ for id_, _ in sorted(pairs, key=lambda p: key(p[1]), reverse=reverse)]
    return KeyedList._build(order, dict(kl._elements))
