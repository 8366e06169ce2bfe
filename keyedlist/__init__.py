# keyed list value type and conversion from/to sequences
from .keyed_list import KeyedList, from_array, to_array

# lookup
from .lookup import (
    get_by_id,
    get_by_ids,
    get_ids,
    get_id_by_index,
    get_by_index,
    get_first,
    get_last,
    get_count,
)

# copy-on-write mutations
from .mutation import append, insert, update, remove_by_id, remove

# derived views
from .views import map, map_ids, map_to_list, filter, sort, sort_by

# plain value shape and dataframe conversion
from .serialization import to_dict, from_dict, validate_shape
from .dataframe import to_dataframe, from_dataframe

# errors and log utility
from .errors import (
    KeyedListError,
    DuplicateKeyError,
    InvalidElementError,
    InvalidShapeError,
)
from .logger import logger, setup_logger
