# Helpers to handle the elements stored in a keyed list. An element is any
# record exposing a string `id`: either a mapping with an "id" entry or an
# object with an `id` attribute (dataclass, named tuple, plain object).

import copy
import dataclasses
from collections.abc import Mapping, MutableMapping

from .errors import InvalidElementError


def _is_namedtuple(x) -> bool:
    return isinstance(x, tuple) and hasattr(x, "_replace") and hasattr(x, "_fields")


def get_id(element) -> str:
    """Returns the id of the element, checking that it is a string.

    Args:
        element: mapping or object exposing an `id`.

    Returns:
        str: the element id.

    Raises:
        InvalidElementError: if the element has no `id`, or if it is not a string.
    """
    if isinstance(element, Mapping):
        if "id" not in element:
            raise InvalidElementError(f"element {element!r} has no 'id' entry")
        id_ = element["id"]
    else:
        try:
            id_ = element.id
        except AttributeError:
            raise InvalidElementError(
                f"element of type {type(element).__name__} has no 'id' attribute"
            )
    if not isinstance(id_, str):
        raise InvalidElementError(
            f"element id must be a string, got {type(id_).__name__}: {id_!r}"
        )
    return id_


def copy_element(element):
    """Returns an independent (deep) copy of the element."""
    return copy.deepcopy(element)


def to_record(element) -> dict:
    """Returns the fields of the element as a new dictionary, `id` included."""
    if isinstance(element, Mapping):
        return copy.deepcopy(dict(element))
    if dataclasses.is_dataclass(element) and not isinstance(element, type):
        return dataclasses.asdict(element)
    if _is_namedtuple(element):
        return copy.deepcopy(element._asdict())
    if hasattr(element, "__dict__"):
        return copy.deepcopy(vars(element))
    raise InvalidElementError(
        f"cannot extract the fields of an element of type {type(element).__name__}"
    )


def _patch_fields(patch) -> dict:
    # only the fields the patch actually carries
    if isinstance(patch, Mapping):
        return copy.deepcopy(dict(patch))
    return to_record(patch)


def merge(element, patch):
    """Shallow merge of the patch fields over the element fields. The patch
    fields win. The result is a new element of the same kind as `element`;
    neither argument is modified.

    Args:
        element: the stored element.
        patch: mapping or object with an `id` equal to the element id, and
            any subset of the other fields.

    Returns:
        the merged element.
    """
    if get_id(patch) != get_id(element):
        raise InvalidElementError(
            f"patch id {get_id(patch)!r} does not match element id {get_id(element)!r}"
        )
    fields = _patch_fields(patch)

    if isinstance(element, Mapping):
        if isinstance(element, MutableMapping):
            merged = copy.deepcopy(element)
            merged.update(fields)
            return merged
        # read-only mapping: the result is a plain dict
        return {**copy.deepcopy(dict(element)), **fields}
    if dataclasses.is_dataclass(element) and not isinstance(element, type):
        try:
            return dataclasses.replace(copy.deepcopy(element), **fields)
        except TypeError as ex:
            raise InvalidElementError(
                f"cannot patch {type(element).__name__} {get_id(element)!r}: {ex}"
            ) from ex
    if _is_namedtuple(element):
        try:
            return copy.deepcopy(element)._replace(**fields)
        except ValueError as ex:
            raise InvalidElementError(
                f"cannot patch {type(element).__name__} {get_id(element)!r}: {ex}"
            ) from ex

    merged = copy.deepcopy(element)
    for name, value in fields.items():
        setattr(merged, name, value)
    return merged
