# Exceptions raised by keyed list operations.


class KeyedListError(Exception):
    """Base class for all keyed list errors."""


class DuplicateKeyError(KeyedListError, ValueError):
    """Raised when an element would share its id with an element already
    present in the list."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Duplicated id {key!r} found in keyed list.")


class InvalidElementError(KeyedListError, TypeError):
    """Raised when an element (or a patch) does not expose a string `id`."""


class InvalidShapeError(KeyedListError, ValueError):
    """Raised when a plain value does not describe a valid keyed list."""
