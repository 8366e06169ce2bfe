# Conversion between a KeyedList and its plain value shape
#   {"order": [id, ...], "byKey": {id: element, ...}}
# made only of built-in containers, e.g. to be stored as json by the host.

import jsonschema

from .elements import get_id, copy_element, to_record
from .errors import InvalidShapeError
from .keyed_list import KeyedList

schema = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "KeyedList",
    "type": "object",
    "properties": {
        "order": {
            "type": "array",
            "items": {"type": "string"},
            "uniqueItems": True,
        },
        "byKey": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {"id": {"type": "string"}},
                "required": ["id"],
            },
        },
    },
    "required": ["order", "byKey"],
    "additionalProperties": False,
}


def validate_shape(data):
    """Validates a plain value against the keyed list json schema, and checks
    that `order` and `byKey` refer to the same ids, with each element stored
    under its own id.

    Raises:
        InvalidShapeError: if any of the checks fails.
    """
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.exceptions.ValidationError as ex:
        raise InvalidShapeError(f"invalid keyed list: {ex.message}") from ex

    order, by_key = data["order"], data["byKey"]
    missing = [k for k in order if k not in by_key]
    if missing:
        raise InvalidShapeError(f"ids {missing} in order have no element")
    ids = set(order)
    dangling = [k for k in by_key if k not in ids]
    if dangling:
        raise InvalidShapeError(f"elements {dangling} are not in order")
    for key, element in by_key.items():
        if element["id"] != key:
            raise InvalidShapeError(
                f"element with id {element['id']!r} stored under key {key!r}"
            )


def to_dict(kl) -> dict:
    """Returns the plain value shape of the list. Elements are converted to
    dictionaries."""
    return {
        "order": list(kl.order),
        "byKey": {id_: to_record(element) for id_, element in kl.items()},
    }


def from_dict(data) -> KeyedList:
    """Creates a keyed list from its plain value shape, after validation.
    Elements are copied into the list.

    Args:
        data (dict): dictionary with `order` and `byKey` entries.

    Returns:
        KeyedList: the new list.
    """
    validate_shape(data)
    elements = {}
    for id_ in data["order"]:
        element = data["byKey"][id_]
        elements[get_id(element)] = copy_element(element)
    return KeyedList._build(data["order"], elements)
