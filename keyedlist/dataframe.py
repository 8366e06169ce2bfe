import numpy as np
import pandas as pd

from .elements import to_record
from .keyed_list import KeyedList, from_array


def _is_missing(value) -> bool:
    return pd.api.types.is_scalar(value) and pd.isna(value)


def _column(values):
    # 1-d object array first, so that list values stay single cells
    arr = np.empty(len(values), dtype=object)
    for i, value in enumerate(values):
        arr[i] = value
    return pd.array(arr)


def to_dataframe(kl) -> pd.DataFrame:
    """Returns a dataframe with one row per element, in list order. The index
    of the dataframe are the element ids (index name `id`), and the columns
    are the remaining fields, in order of first appearance.

    Columns use pandas nullable dtypes (`Int64`, `Float64`, `string`, ...),
    so that a field missing from some elements is `pd.NA` and does not turn
    integers into floats.
    """
    records = []
    for element in kl:
        record = to_record(element)
        record.pop("id")
        records.append(record)
    columns = list(dict.fromkeys(name for record in records for name in record))
    data = {
        name: _column([record.get(name, pd.NA) for record in records])
        for name in columns
    }
    return pd.DataFrame(data, index=pd.Index(list(kl.order), name="id", dtype=object))


def from_dataframe(df: pd.DataFrame) -> KeyedList:
    """Creates a keyed list whose elements are the rows of the dataframe, as
    dictionaries, in row order. Ids are taken from the `id` column if present,
    from the index otherwise, and converted to strings.

    Missing values (NaN, NA, None) are left out of the element, so that
    `from_dataframe(to_dataframe(kl))` gives back elements with their own
    fields only. NumPy scalars are converted to the built-in Python types.

    Raises:
        DuplicateKeyError: if two rows have the same id.
    """
    if "id" in df.columns:
        ids = df["id"]
        df = df.drop(columns="id")
    else:
        ids = df.index
    elements = []
    for id_, record in zip(ids, df.to_dict("records")):
        element = {"id": str(id_)}
        for name, value in record.items():
            if _is_missing(value):
                continue
            if isinstance(value, np.generic):
                value = value.item()
            element[name] = value
        elements.append(element)
    return from_array(elements)
