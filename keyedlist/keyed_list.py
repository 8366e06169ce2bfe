from .elements import get_id, copy_element
from .errors import DuplicateKeyError
from .logger import logger


class KeyedList:
    """Immutable, order-preserving list of elements indexed by their `id`.
    The object has two elements:
    - order: ordered tuple of element ids (strings)
    - by_key: dictionary mapping ids to the elements.

    Each id in `order` is present in `by_key` and vice-versa, and no id is
    repeated. Elements are copied when they enter the list and every time
    they are returned, so that the content of the list can never be changed
    from the outside.

    The object can be:
    - indexed by id, and a copy of the corresponding element is returned.
    - iterated over all of its elements like a list.
    - iterated over all the id-element pairs like a dictionary with `items`.
    - queried for the list of ids with the `keys` function (like a dictionary).

    The object's `len` is the number of elements. New lists are created with
    `from_array` and by the mutation functions, never by modifying a list.
    """

    __slots__ = ("_order", "_elements")

    def __init__(self):
        self._order = ()
        self._elements = {}

    @classmethod
    def _build(cls, order, elements):
        """Wraps already validated and copied content into a new list. The
        caller hands over ownership of `elements`."""
        kl = cls.__new__(cls)
        kl._order = tuple(order)
        kl._elements = elements
        return kl

    @property
    def order(self):
        """Tuple of ids, in list order."""
        return self._order

    @property
    def by_key(self):
        """New dictionary id -> copy of the element."""
        return {k: copy_element(v) for k, v in self._elements.items()}

    def __contains__(self, id_):
        """Returns whether the id is in the list"""
        return id_ in self._elements

    def __iter__(self):
        """Returns an iterator over copies of the elements, in order"""
        return (copy_element(self._elements[k]) for k in self._order)

    def items(self):
        """Returns an iterator over the (id, element) pairs, like a dictionary"""
        return ((k, copy_element(self._elements[k])) for k in self._order)

    def __len__(self):
        return len(self._order)

    def __getitem__(self, id_):
        """Returns a copy of the element corresponding to the id"""
        try:
            return copy_element(self._elements[id_])
        except KeyError:
            raise KeyError(f"Id {id_} not found in {self.__class__.__name__}")

    def keys(self):
        """Returns the list of ids (like a dictionary)"""
        return list(self._order)

    def __eq__(self, other):
        if not isinstance(other, KeyedList):
            return NotImplemented
        return self._order == other._order and self._elements == other._elements

    __hash__ = None

    def __repr__(self):
        head = ", ".join(repr(k) for k in self._order[:5])
        if len(self._order) > 5:
            head += ", ..."
        return f"KeyedList(n. elements = {len(self)}, ids = [{head}])"


def from_array(elements=()):
    """Creates a keyed list from a sequence of elements. The elements must
    have unique string ids; each element is copied into the list.

    ```python
    persons = [{"id": "1", "name": "Peter"}, {"id": "2", "name": "John"}]
    kl = from_array(persons)
    john = get_by_id(kl, "2")
    ```

    Args:
        elements (iterable): elements exposing a string `id`.

    Returns:
        KeyedList: the new list.

    Raises:
        DuplicateKeyError: if two elements share the same id.
        InvalidElementError: if an element has no string id.
    """
    order = []
    stored = {}
    for element in elements:
        id_ = get_id(element)
        if id_ in stored:
            logger.debug("from_array: rejecting duplicated id %r", id_)
            raise DuplicateKeyError(id_)
        order.append(id_)
        stored[id_] = copy_element(element)
    return KeyedList._build(order, stored)


def to_array(kl):
    """Returns a new list with a copy of each element, in list order."""
    return list(kl)
